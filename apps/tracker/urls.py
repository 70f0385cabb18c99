from django.urls import path
from . import views

app_name = 'tracker'

urlpatterns = [
    # GET    /api/tracker/records/             - List records (?date=YYYY-MM-DD)
    # POST   /api/tracker/records/             - Add a record
    # DELETE /api/tracker/records/{id}/        - Remove a record
    path('records/', views.records, name='records'),
    path('records/<str:record_id>/', views.record_detail, name='record-detail'),

    path('shops/', views.shops, name='shops'),
    path('days/<str:day>/', views.day_detail, name='day-detail'),
]
