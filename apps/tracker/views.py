from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .dates import day_label, parse_date
from .exceptions import CapacityExceeded, InvalidRecordError, ParseError
from .serializers import (
    # Input serializers
    DrinkDraftSerializer,
    RecordFilterSerializer,
    # Response serializers
    DrinkRecordSerializer,
    ShopCatalogSerializer,
    DaySummarySerializer,
    ErrorSerializer,
)
from .services import open_record_store


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('date', OpenApiTypes.STR, description='Only records on this day (YYYY-MM-DD)'),
    ],
    responses={200: DrinkRecordSerializer(many=True), 400: ErrorSerializer},
    description="List drink records in insertion order.",
    tags=['tracker'],
)
@extend_schema(
    methods=['POST'],
    request=DrinkDraftSerializer,
    responses={
        201: DrinkRecordSerializer,
        400: ErrorSerializer,
        409: ErrorSerializer,
    },
    description="Log a drink on a day. A day holds at most two drinks.",
    tags=['tracker'],
)
@api_view(['GET', 'POST'])
def records(request):
    """List or add drink records - thin HTTP handler."""
    store = open_record_store()

    if request.method == 'POST':
        serializer = DrinkDraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = store.add(serializer.to_draft())
        except CapacityExceeded as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except (ParseError, InvalidRecordError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(DrinkRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    # Validate query parameters using input serializer
    filter_serializer = RecordFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)
    day = filter_serializer.validated_data.get('date')

    results = store.records_on(day) if day else store.all_records()
    return Response(DrinkRecordSerializer(results, many=True).data)


@extend_schema(
    responses={204: None},
    description="Remove a drink record. Unknown ids are ignored.",
    tags=['tracker'],
)
@api_view(['DELETE'])
def record_detail(request, record_id):
    """Remove a record - thin HTTP handler."""
    store = open_record_store()
    store.remove(record_id)
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={200: ShopCatalogSerializer},
    description="Shop names in order of first appearance.",
    tags=['tracker'],
)
@api_view(['GET'])
def shops(request):
    """Get the shop catalog - thin HTTP handler."""
    store = open_record_store()
    return Response(ShopCatalogSerializer({'shops': store.shops()}).data)


@extend_schema(
    responses={200: DaySummarySerializer, 400: ErrorSerializer},
    description="Records on a day and how many more drinks it can take.",
    tags=['tracker'],
)
@api_view(['GET'])
def day_detail(request, day):
    """Get a single day's records - thin HTTP handler."""
    try:
        parse_date(day)
    except ParseError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    store = open_record_store()
    summary = {
        'date': day,
        'label': day_label(day),
        'records': store.records_on(day),
        'remaining_capacity': store.remaining_capacity(day),
    }
    return Response(DaySummarySerializer(summary).data)
