from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.tracker.services import open_record_store
from .analytics import DrinkAnalytics
from .calendar_grid import build_month_view
from .serializers import (
    # Input serializers
    MonthQuerySerializer,
    RankingQuerySerializer,
    CalendarQuerySerializer,
    # Response serializers
    StatsSerializer,
    RankingResponseSerializer,
    FrequencyEntrySerializer,
    CalendarResponseSerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)

MONTH_PARAMETERS = [
    OpenApiParameter('year', OpenApiTypes.INT, description='Reference year (defaults to current year)'),
    OpenApiParameter('month', OpenApiTypes.INT, description='Reference month 1-12 (defaults to current month)'),
]

FIELD_PARAMETER = OpenApiParameter(
    'field', OpenApiTypes.STR, description="Ranking field: 'shop' or 'item'", default='shop'
)


@extend_schema(
    parameters=MONTH_PARAMETERS,
    responses={
        200: StatsSerializer,
        400: ErrorSerializer,
    },
    description="Get drink count and spending for a month and its year.",
    tags=['analytics'],
)
@api_view(['GET'])
def stats(request):
    """Get monthly/annual statistics - thin HTTP handler."""
    # Validate query parameters using input serializer
    query_serializer = MonthQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    store = open_record_store()
    data = DrinkAnalytics.calculate_stats(
        store.all_records(),
        params['year'],
        params['month'],
    )

    return Response(data)


@extend_schema(
    parameters=[FIELD_PARAMETER],
    responses={
        200: RankingResponseSerializer,
        400: ErrorSerializer,
    },
    description="Get all shops or items ranked by how often they were ordered.",
    tags=['analytics'],
)
@api_view(['GET'])
def ranking(request):
    """Get the full frequency ranking - thin HTTP handler."""
    query_serializer = RankingQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    field = query_serializer.validated_data['field']

    store = open_record_store()
    results = DrinkAnalytics.rank_frequency(store.all_records(), field)

    return Response({
        'field': field,
        'results': results,
    })


@extend_schema(
    parameters=[FIELD_PARAMETER],
    responses={
        200: FrequencyEntrySerializer,
        400: ErrorSerializer,
    },
    description="Get the favourite shop or item. count == 0 means no data.",
    tags=['analytics'],
)
@api_view(['GET'])
def top(request):
    """Get the most frequent shop or item - thin HTTP handler."""
    query_serializer = RankingQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    store = open_record_store()
    data = DrinkAnalytics.top_frequency(
        store.all_records(),
        query_serializer.validated_data['field'],
    )

    return Response(data)


@extend_schema(
    parameters=MONTH_PARAMETERS + [
        OpenApiParameter('selected', OpenApiTypes.STR, description='Selected day (YYYY-MM-DD)'),
    ],
    responses={
        200: CalendarResponseSerializer,
        400: ErrorSerializer,
    },
    description="Get the month grid with records, dots and selection flags per day.",
    tags=['analytics'],
)
@api_view(['GET'])
def calendar(request):
    """Get the calendar month view - thin HTTP handler."""
    query_serializer = CalendarQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    store = open_record_store()
    view = build_month_view(
        store,
        params['year'],
        params['month'],
        selected_date=params.get('selected'),
    )

    return Response(CalendarResponseSerializer(view).data)


@extend_schema(
    parameters=MONTH_PARAMETERS,
    responses={200: DashboardResponseSerializer},
    description="Get the stat cards and favourites for the viewed month.",
    tags=['analytics'],
)
@api_view(['GET'])
def dashboard(request):
    """Get comprehensive dashboard data for the viewed month."""
    query_serializer = MonthQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    store = open_record_store()
    records = store.all_records()

    return Response({
        'year': params['year'],
        'month': params['month'],
        'stats': DrinkAnalytics.calculate_stats(records, params['year'], params['month']),
        'favorite_shop': DrinkAnalytics.top_frequency(records, 'shop'),
        'favorite_item': DrinkAnalytics.top_frequency(records, 'item'),
    })
