"""
Pagination Package - page slicing and page metadata.
"""

from agreement_query.pagination.paginator import build_page_info, paginate

__all__ = ["build_page_info", "paginate"]
