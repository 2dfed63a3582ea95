"""
Custom pagination classes.
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class AdminListPagination(PageNumberPagination):
    """
    Pagination for admin listings.

    Items go under a caller supplied key next to a `pagination` block, so a
    listing can add its own sections (for example `stats`).
    """
    page_size = 20
    page_size_query_param = 'limit'
    max_page_size = 100

    def get_paginated_response(self, data, items_key='results', **extra):
        return Response({
            items_key: data,
            'pagination': {
                'page': self.page.number,
                'limit': self.page.paginator.per_page,
                'total': self.page.paginator.count,
                'totalPages': self.page.paginator.num_pages,
            },
            **extra,
        })
