"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
store failures propagate to ``modules.core.exceptions``.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema, inline_serializer
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.bootstrap import build_product_service
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.serializers import ProductSerializer

_NOT_FOUND = {"detail": "Product not found."}
_NOT_AN_OBJECT = {"detail": "Request body must be a JSON object."}

_ProductInput = inline_serializer(
    name="ProductInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.FloatField(),
        "available": serializers.BooleanField(),
    },
)


class ProductViewSet(GenericViewSet):
    """ViewSet for the Product catalog.

    All data access goes through ``ProductService``; the ViewSet never
    touches the ORM.  Ids are integers, so anything else misses the
    route entirely.
    """

    serializer_class = ProductSerializer
    lookup_value_regex = r"\d+"
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_product_service()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.find_all()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: OpenApiResponse()})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.find_by_id(int(pk))
        except ProductNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=_ProductInput, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        if not isinstance(data, dict):
            return Response(_NOT_AN_OBJECT, status=status.HTTP_400_BAD_REQUEST)

        try:
            dto = CreateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                available=data.get("available", True),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        product = self._service.add_product(dto)
        return Response(
            ProductSerializer(product).data, status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=_ProductInput,
        responses={200: ProductSerializer, 404: OpenApiResponse()},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        data = request.data
        if not isinstance(data, dict):
            return Response(_NOT_AN_OBJECT, status=status.HTTP_400_BAD_REQUEST)

        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                available=data.get("available"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product_by_id(int(pk), dto)
        except ProductNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        self._service.delete_by_id(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
