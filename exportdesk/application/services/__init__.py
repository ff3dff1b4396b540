from .entity_form import EntityForm
from .list_controller import EntityListController
from .paginator import clamp_page, page_count, paginate
from .record_filter import filter_records, matches_filter, matches_search, to_query_params
from .reference_index import ReferenceIndex
from .report_service import ReportService
from .resource_catalog import ResourceCatalog

__all__ = [
    "EntityForm",
    "EntityListController",
    "clamp_page",
    "page_count",
    "paginate",
    "filter_records",
    "matches_filter",
    "matches_search",
    "to_query_params",
    "ReferenceIndex",
    "ReportService",
    "ResourceCatalog",
]
