"""
Taxonomy API v1 views.
"""
from uuid import UUID

from django.http import HttpResponse
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.domain import utc_now
from shared.interfaces.pagination import AdminListPagination
from shared.interfaces.permissions import IsTaxonomyAdmin, actor_id
from ....application.dtos import (
    CategoryCreateDTO,
    CategoryFilterDTO,
    CategoryUpdateDTO,
    ImportCategoriesDTO,
    TagCreateDTO,
    TagFilterDTO,
    TagUpdateDTO,
)
from ....application.use_cases import ImportCategoriesUseCase
from ....conf import taxonomy_setting
from ....domain.exceptions import InvalidTaxonomyInputError
from ....domain.value_objects.tag_scope import TagScope
from ....infrastructure.container import get_taxonomy_service
from ...files import CategoryExporter, CategoryFileParser
from ...serializers import (
    CategorySerializer,
    CategoryWriteSerializer,
    CategoryTreeNodeSerializer,
    TagSerializer,
    TagWriteSerializer,
    TagMaintenanceSerializer,
    TagMaintenanceResultSerializer,
    CategoryImportSerializer,
    ImportReportSerializer,
    CategoryExportQuerySerializer,
)
from ...serializers.fields import PARENT_REFERENCE_ALIAS, ROOT_REFERENCE

TRUE_VALUES = ('true', '1', 'yes')


def _flag(request, name, default=False):
    value = request.query_params.get(name)
    if value is None:
        return default
    return value.lower() in TRUE_VALUES


def _uuid_param(request, name):
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        raise InvalidTaxonomyInputError(f"'{value}' is not a valid id", field=name)


def _int_param(request, name):
    value = request.query_params.get(name)
    if value in (None, ''):
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidTaxonomyInputError(f"{name} must be an integer", field=name)


@extend_schema(tags=['Categories'])
class CategoryListCreateView(APIView):
    """Category list and create endpoint."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='limit', type=int, required=False),
            OpenApiParameter(name='includeInactive', type=bool, required=False),
            OpenApiParameter(name=PARENT_REFERENCE_ALIAS, type=str, required=False, description="Category id or 'root'"),
            OpenApiParameter(name='level', type=int, required=False),
            OpenApiParameter(name='search', type=str, required=False),
            OpenApiParameter(name='sortBy', type=str, required=False),
            OpenApiParameter(name='sortOrder', type=str, required=False, enum=['asc', 'desc']),
        ],
        responses={200: CategorySerializer(many=True)},
        summary="List categories",
    )
    def get(self, request):
        parent = request.query_params.get(PARENT_REFERENCE_ALIAS)
        filters = CategoryFilterDTO(
            root_only=parent == ROOT_REFERENCE,
            parent_id=None if parent == ROOT_REFERENCE else _uuid_param(request, PARENT_REFERENCE_ALIAS),
            level=_int_param(request, 'level'),
            search=request.query_params.get('search', ''),
            include_inactive=_flag(request, 'includeInactive'),
            sort_by=request.query_params.get('sortBy') or None,
            sort_direction='desc' if request.query_params.get('sortOrder') == 'desc' else 'asc',
        )

        service = get_taxonomy_service()
        categories = service.list_categories(filters)

        paginator = AdminListPagination()
        page = paginator.paginate_queryset(categories, request, view=self)
        serializer = CategorySerializer(page, many=True)
        return paginator.get_paginated_response(
            serializer.data,
            items_key='categories',
            stats=service.category_stats(),
        )

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = get_taxonomy_service()
        category = service.create_category(
            CategoryCreateDTO(**serializer.validated_data),
            actor=actor_id(request),
        )

        output = CategorySerializer(category)
        return Response({'category': output.data}, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    """Category detail endpoint."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: UUID):
        category = get_taxonomy_service().get_category(category_id)
        return Response({'category': CategorySerializer(category).data})

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def patch(self, request, category_id: UUID):
        serializer = CategoryWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        service = get_taxonomy_service()
        category = service.update_category(
            category_id,
            CategoryUpdateDTO(**serializer.validated_data),
            actor=actor_id(request),
        )
        return Response({'category': CategorySerializer(category).data})

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def put(self, request, category_id: UUID):
        return self.patch(request, category_id)

    @extend_schema(summary="Delete a category")
    def delete(self, request, category_id: UUID):
        get_taxonomy_service().delete_category(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Categories'])
class CategoryPathView(APIView):
    """Breadcrumb from the root down to a category."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        responses={200: CategorySerializer(many=True)},
        summary="Get category path",
    )
    def get(self, request, category_id: UUID):
        path = get_taxonomy_service().category_path(category_id)
        return Response({'path': CategorySerializer(path, many=True).data})


@extend_schema(tags=['Categories'])
class CategoryTagsView(APIView):
    """Tags selectable for products of a category."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        responses={200: TagSerializer(many=True)},
        summary="List tags available to a category",
    )
    def get(self, request, category_id: UUID):
        tags = get_taxonomy_service().tags_for_category(category_id)
        return Response({'tags': TagSerializer(tags, many=True).data})


@extend_schema(tags=['Categories'])
class CategoryTreeView(APIView):
    """Public category tree with product counts."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CategoryTreeNodeSerializer(many=True)},
        summary="Get the category tree",
    )
    def get(self, request):
        roots = get_taxonomy_service().category_tree(visible_only=True)
        return Response({'tree': CategoryTreeNodeSerializer(roots, many=True).data})


@extend_schema(tags=['Categories'])
class CategoryImportView(APIView):
    """Bulk category import from CSV or JSON."""
    permission_classes = [IsTaxonomyAdmin]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        request=CategoryImportSerializer,
        responses={200: ImportReportSerializer},
        summary="Import categories",
    )
    def post(self, request):
        serializer = CategoryImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        upload = serializer.validated_data['file']
        rows = CategoryFileParser().parse(upload.name, upload.read())

        use_case = ImportCategoriesUseCase(
            taxonomy_service=get_taxonomy_service(),
            actor=actor_id(request),
        )
        result = use_case.execute(
            ImportCategoriesDTO(
                rows=rows,
                update_existing=serializer.validated_data['update_existing'],
            )
        )
        return Response(ImportReportSerializer(result.data).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Categories'])
class CategoryExportView(APIView):
    """Category export as a CSV download or a JSON document."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='format', type=str, required=False, enum=['csv', 'json']),
            OpenApiParameter(name='includeInactive', type=bool, required=False),
        ],
        summary="Export categories",
    )
    def get(self, request):
        query = CategoryExportQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        categories = get_taxonomy_service().list_categories(
            CategoryFilterDTO(include_inactive=query.validated_data['includeInactive'])
        )
        exporter = CategoryExporter(categories)
        now = utc_now()

        if query.validated_data['format'] == 'json':
            serialized = CategorySerializer(exporter.categories, many=True).data
            return Response(exporter.to_json(serialized, exported_at=now))

        response = HttpResponse(exporter.to_csv(), content_type='text/csv')
        response['Content-Disposition'] = f'attachment; filename="{exporter.filename("csv", now)}"'
        return response


@extend_schema(tags=['Tags'])
class TagListCreateView(APIView):
    """Tag list and create endpoint."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='limit', type=int, required=False),
            OpenApiParameter(name='scope', type=str, required=False, description="Category id or 'global'"),
            OpenApiParameter(name='includeInactive', type=bool, required=False),
            OpenApiParameter(name='search', type=str, required=False),
        ],
        responses={200: TagSerializer(many=True)},
        summary="List tags",
    )
    def get(self, request):
        scope = request.query_params.get('scope')
        filters = TagFilterDTO(
            scope=TagScope.GLOBAL if scope == 'global' else _uuid_param(request, 'scope'),
            include_inactive=_flag(request, 'includeInactive'),
            search=request.query_params.get('search', ''),
        )
        tags = get_taxonomy_service().list_tags(filters)

        paginator = AdminListPagination()
        page = paginator.paginate_queryset(tags, request, view=self)
        serializer = TagSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data, items_key='tags')

    @extend_schema(
        request=TagWriteSerializer,
        responses={201: TagSerializer},
        summary="Create a tag",
    )
    def post(self, request):
        serializer = TagWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        data.setdefault('color', taxonomy_setting('DEFAULT_TAG_COLOR'))
        tag = get_taxonomy_service().create_tag(TagCreateDTO(**data), actor=actor_id(request))

        output = TagSerializer(tag)
        return Response({'tag': output.data}, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Tags'])
class TagDetailView(APIView):
    """Tag detail endpoint."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        responses={200: TagSerializer},
        summary="Get tag detail",
    )
    def get(self, request, tag_id: UUID):
        tag = get_taxonomy_service().get_tag(tag_id)
        return Response({'tag': TagSerializer(tag).data})

    @extend_schema(
        request=TagWriteSerializer,
        responses={200: TagSerializer},
        summary="Update a tag",
    )
    def patch(self, request, tag_id: UUID):
        service = get_taxonomy_service()
        service.guard_tag_mutable(tag_id)

        serializer = TagWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        tag = service.update_tag(
            tag_id,
            TagUpdateDTO(**serializer.validated_data),
            actor=actor_id(request),
        )
        return Response({'tag': TagSerializer(tag).data})

    @extend_schema(
        request=TagWriteSerializer,
        responses={200: TagSerializer},
        summary="Update a tag",
    )
    def put(self, request, tag_id: UUID):
        return self.patch(request, tag_id)

    @extend_schema(summary="Delete a tag")
    def delete(self, request, tag_id: UUID):
        get_taxonomy_service().delete_tag(tag_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Tags'])
class TagMaintenanceView(APIView):
    """Recount tag usage or remove unused tags."""
    permission_classes = [IsTaxonomyAdmin]

    @extend_schema(
        request=TagMaintenanceSerializer,
        responses={200: TagMaintenanceResultSerializer},
        summary="Run tag maintenance",
    )
    def post(self, request):
        serializer = TagMaintenanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = get_taxonomy_service()
        action = serializer.validated_data['action']
        if action == 'refresh':
            affected = service.refresh_tag_usage()
        else:
            affected = service.clean_unused_tags(
                older_than_days=serializer.validated_data.get(
                    'older_than_days', taxonomy_setting('UNUSED_TAG_RETENTION_DAYS')
                )
            )

        output = TagMaintenanceResultSerializer({'action': action, 'affected': affected})
        return Response(output.data)
