"""
JSON endpoints over the inventory service.

Views only parse requests and map errors; every rule lives in
stockroom.service.Inventory.
"""

import json
from functools import wraps

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from stockroom.exceptions import (
    InventoryError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)
from stockroom.service import Inventory

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (OutOfStockError, 409),
)


def error_status(exc: InventoryError) -> int:
    """HTTP status for an inventory error (500 for storage and anything else)."""
    for error_class, status in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status
    return 500


def inventory_endpoint(*methods):
    """Restrict methods, skip CSRF and render InventoryError as JSON."""
    def decorator(view):
        @csrf_exempt
        @require_http_methods(list(methods))
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            try:
                return view(request, *args, **kwargs)
            except InventoryError as exc:
                return JsonResponse(exc.as_dict(), status=error_status(exc))
        return wrapper
    return decorator


def _json_body(request, expected_type):
    try:
        payload = json.loads(request.body or b'null')
    except (ValueError, UnicodeDecodeError):
        raise ValidationError('INVALID_REQUEST') from None
    if not isinstance(payload, expected_type):
        raise ValidationError('INVALID_REQUEST')
    return payload


def _int_field(payload: dict, field: str) -> int:
    value = payload.get(field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError('INVALID_REQUEST', field=field)
    return value


@inventory_endpoint('POST')
def create_warehouse(request):
    payload = _json_body(request, dict)
    is_available = payload.get('is_available', True)
    if not isinstance(is_available, bool):
        raise ValidationError('INVALID_REQUEST', field='is_available')

    warehouse_id = Inventory.create_warehouse(payload.get('name'), is_available)
    return JsonResponse({'id': warehouse_id}, status=201)


@inventory_endpoint('POST')
def create_product(request):
    payload = _json_body(request, dict)
    product_id = Inventory.create_product(
        name=payload.get('name', ''),
        size=payload.get('size', ''),
        code=payload.get('code'),
        quantity=_int_field(payload, 'quantity'),
        warehouse_id=_int_field(payload, 'warehouse_id'),
    )
    return JsonResponse({'id': product_id}, status=201)


@inventory_endpoint('DELETE')
def delete_product(request, product_id):
    Inventory.delete_product(product_id)
    return HttpResponse(status=204)


@inventory_endpoint('POST')
def reserve_products(request):
    Inventory.reserve(_json_body(request, list))
    return HttpResponse(status=204)


@inventory_endpoint('POST')
def release_products(request):
    Inventory.release(_json_body(request, list))
    return HttpResponse(status=204)


@inventory_endpoint('GET')
def remaining_products(request, warehouse_id):
    return JsonResponse(Inventory.remaining(warehouse_id), safe=False)
