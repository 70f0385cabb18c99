from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Stat cards
    path('stats/', views.stats, name='stats'),

    # Rankings
    path('ranking/', views.ranking, name='ranking'),
    path('top/', views.top, name='top'),

    # Month view
    path('calendar/', views.calendar, name='calendar'),

    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),
]
