"""
Categories API v1 views.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import QueryParamPagination
from ....application.dtos.category_dto import (
    CategoryCreateDTO,
    CategoryListDTO,
    CategoryLookupDTO,
    CategoryUpdateDTO,
)
from ....application.use_cases import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from ....infrastructure.repositories import DjangoCategoryGateway
from ...serializers.category_serializer import (
    CategoryIdSerializer,
    CategoryPageSerializer,
    CategorySerializer,
    CategoryWriteSerializer,
)


@extend_schema(tags=['Categories'])
class CategoryListCreateView(APIView):
    """Category list and create endpoint."""
    permission_classes = [AllowAny]
    pagination = QueryParamPagination()

    @extend_schema(
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='per_page', type=int, required=False),
            OpenApiParameter(name='terms', type=str, required=False),
            OpenApiParameter(name='sort', type=str, required=False, enum=['name', 'created_at', 'updated_at']),
            OpenApiParameter(name='direction', type=str, required=False, enum=['asc', 'desc']),
        ],
        responses={200: CategoryPageSerializer, 400: OpenApiTypes.STR},
        summary="List categories",
    )
    def get(self, request):
        params = request.query_params
        input_dto = CategoryListDTO(
            page=self.pagination.get_page(request),
            per_page=self.pagination.get_page_size(request),
            terms=params.get('terms', ''),
            sort=params.get('sort', ''),
            direction=params.get('direction', ''),
        )

        use_case = ListCategoriesUseCase(category_gateway=DjangoCategoryGateway())
        result = use_case.execute(input_dto)

        return Response(CategoryPageSerializer(result).data)

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={201: CategoryIdSerializer, 400: OpenApiTypes.STR},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CreateCategoryUseCase(category_gateway=DjangoCategoryGateway())
        result = use_case.execute(CategoryCreateDTO(**serializer.validated_data))

        return Response(
            CategoryIdSerializer(result).data,
            status=status.HTTP_201_CREATED,
            headers={'Location': f"/categories/{result.id}"},
        )


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    """Category detail, update and delete endpoint."""
    permission_classes = [AllowAny]
    # Every lookup failure, malformed IDs included, reads as "not found"
    domain_error_statuses = {'GET': status.HTTP_404_NOT_FOUND}

    @extend_schema(
        responses={200: CategorySerializer, 404: OpenApiTypes.STR},
        summary="Get category detail",
    )
    def get(self, request, category_id: str):
        use_case = GetCategoryUseCase(category_gateway=DjangoCategoryGateway())
        result = use_case.execute(CategoryLookupDTO(id=category_id))

        return Response(CategorySerializer(result).data)

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={200: CategoryIdSerializer, 400: OpenApiTypes.STR},
        summary="Update a category",
    )
    def put(self, request, category_id: str):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateCategoryUseCase(category_gateway=DjangoCategoryGateway())
        result = use_case.execute(CategoryUpdateDTO(id=category_id, **serializer.validated_data))

        return Response(CategoryIdSerializer(result).data)

    @extend_schema(
        responses={204: None, 400: OpenApiTypes.STR},
        summary="Delete a category",
    )
    def delete(self, request, category_id: str):
        use_case = DeleteCategoryUseCase(category_gateway=DjangoCategoryGateway())
        use_case.execute(CategoryLookupDTO(id=category_id))

        return Response(status=status.HTTP_204_NO_CONTENT)
