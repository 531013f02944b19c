"""
Unit Tests for RequestValidator and parse_query_params.

Test Aspects Covered:
    ✅ Error Handling: Invalid page, limit, statuses, search, sort values
    ✅ Edge Cases: Blank parameters, comma-separated statuses
    ✅ Business Logic: Config-driven bounds and defaults
"""

from __future__ import annotations

from datetime import date

import pytest

from agreement_query.config.models import (
    FilterConfig,
    PaginationConfig,
    QueryConfig,
    SortingConfig,
)
from agreement_query.domain.entities import QueryRequest, SortField, SortOrder
from agreement_query.validation.request_validator import (
    RequestValidator,
    ValidationError,
    parse_query_params,
)


@pytest.fixture
def validator() -> RequestValidator:
    return RequestValidator()


class TestRequestValidator:
    """Test cases for RequestValidator."""

    def test_default_request_is_valid(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        validator.validate(QueryRequest(), default_config)

    @pytest.mark.parametrize("page", [0, -1])
    def test_rejects_non_positive_page(
        self, validator: RequestValidator, default_config: QueryConfig, page: int
    ) -> None:
        """
        SCENARIO: page <= 0
        EXPECTED: ValidationError on field "page"
        """
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(page=page), default_config)

        assert exc_info.value.field == "page"

    @pytest.mark.parametrize("limit", [0, -10])
    def test_rejects_non_positive_limit(
        self, validator: RequestValidator, default_config: QueryConfig, limit: int
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(limit=limit), default_config)

        assert exc_info.value.field == "limit"

    def test_rejects_limit_above_maximum(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        with pytest.raises(ValidationError, match="exceeds maximum 100"):
            validator.validate(QueryRequest(limit=101), default_config)

    def test_rejects_page_above_maximum(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        with pytest.raises(ValidationError, match="exceeds maximum 10000"):
            validator.validate(QueryRequest(page=10_001), default_config)

    def test_collects_all_errors(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        """
        SCENARIO: page and limit both invalid
        EXPECTED: One error listing both problems
        """
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(page=0, limit=0), default_config)

        assert len(exc_info.value.errors) == 2
        assert exc_info.value.field is None
        assert "page" in str(exc_info.value) and "limit" in str(exc_info.value)

    def test_rejects_empty_statuses(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(statuses=[]), default_config)

        assert exc_info.value.field == "statuses"

    def test_open_status_vocabulary_by_default(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        validator.validate(QueryRequest(status="Suspended"), default_config)

    def test_rejects_unknown_status_when_vocabulary_configured(
        self, validator: RequestValidator
    ) -> None:
        config = QueryConfig(filters=FilterConfig(allowed_statuses=["Active", "Draft"]))

        with pytest.raises(ValidationError, match="Suspended"):
            validator.validate(
                QueryRequest(status="Suspended", statuses=["Active"]), config
            )

    def test_unknown_single_status_reported_on_status_field(
        self, validator: RequestValidator
    ) -> None:
        """
        SCENARIO: Vocabulary configured, only the single status is unknown
        EXPECTED: ValidationError on field "status"
        """
        config = QueryConfig(filters=FilterConfig(allowed_statuses=["Active", "Draft"]))

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(status="Suspended"), config)

        assert exc_info.value.field == "status"

    def test_unknown_list_status_reported_on_statuses_field(
        self, validator: RequestValidator
    ) -> None:
        config = QueryConfig(filters=FilterConfig(allowed_statuses=["Active", "Draft"]))

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(statuses=["Active", "Closed"]), config)

        assert exc_info.value.field == "statuses"
        assert "Closed" in str(exc_info.value)

    def test_rejects_long_search(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(QueryRequest(search="x" * 101), default_config)

        assert exc_info.value.field == "search"

    def test_inverted_date_range_allowed_by_default(
        self, validator: RequestValidator, default_config: QueryConfig
    ) -> None:
        query = QueryRequest(date_from=date(2025, 12, 1), date_to=date(2025, 1, 1))

        validator.validate(query, default_config)

    def test_inverted_date_range_rejected_when_configured(
        self, validator: RequestValidator
    ) -> None:
        config = QueryConfig(filters=FilterConfig(reject_inverted_date_range=True))
        query = QueryRequest(date_from=date(2025, 12, 1), date_to=date(2025, 1, 1))

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(query, config)

        assert exc_info.value.field == "date_to"


class TestParseQueryParams:
    """Test cases for parse_query_params."""

    def test_empty_params_use_defaults(self) -> None:
        query = parse_query_params({})

        assert query.sort_by is SortField.CREATED_AT
        assert query.sort_order is SortOrder.DESC
        assert query.page == 1
        assert query.limit == 10
        assert query.active_filters() == {}

    def test_camel_case_string_params(self) -> None:
        """
        SCENARIO: Parameters as they arrive from a query string
        EXPECTED: Values are converted to typed fields
        """
        query = parse_query_params(
            {
                "status": "Active",
                "dateFrom": "2025-01-01",
                "dateTo": "2025-12-31",
                "sortBy": "name",
                "sortOrder": "asc",
                "page": "2",
                "limit": "5",
            }
        )

        assert query.status == "Active"
        assert query.date_from == date(2025, 1, 1)
        assert query.date_to == date(2025, 12, 31)
        assert query.sort_by is SortField.NAME
        assert query.sort_order is SortOrder.ASC
        assert (query.page, query.limit) == (2, 5)

    def test_snake_case_params(self) -> None:
        query = parse_query_params({"date_from": "2024-02-01", "sort_by": "endDate"})

        assert query.date_from == date(2024, 2, 1)
        assert query.sort_by is SortField.END_DATE

    def test_comma_separated_statuses(self) -> None:
        query = parse_query_params({"statuses": "Active, Draft,,"})

        assert query.statuses == ["Active", "Draft"]

    def test_statuses_list(self) -> None:
        query = parse_query_params({"statuses": ["Active", " ", "Finalized"]})

        assert query.statuses == ["Active", "Finalized"]

    @pytest.mark.parametrize("value", ["", " , ", []])
    def test_blank_statuses_are_absent(self, value) -> None:
        assert parse_query_params({"statuses": value}).statuses is None

    def test_blank_strings_are_absent(self) -> None:
        query = parse_query_params({"status": "", "search": "  ", "dateFrom": ""})

        assert query.status is None
        assert query.search is None
        assert query.date_from is None

    def test_defaults_come_from_config(self) -> None:
        config = QueryConfig(
            pagination=PaginationConfig(default_limit=25),
            sorting=SortingConfig(
                default_sort_by=SortField.NAME, default_sort_order=SortOrder.ASC
            ),
        )

        query = parse_query_params({}, config)

        assert query.sort_by is SortField.NAME
        assert query.sort_order is SortOrder.ASC
        assert query.limit == 25

    def test_ignores_unknown_params(self) -> None:
        query = parse_query_params({"debug": "true", "includeParties": "true"})

        assert query.model_dump() == QueryRequest().model_dump()

    @pytest.mark.parametrize(
        "params, field",
        [
            ({"sortBy": "updatedAt"}, "sort_by"),
            ({"sortOrder": "up"}, "sort_order"),
            ({"page": "two"}, "page"),
            ({"limit": "1.5"}, "limit"),
            ({"dateFrom": "2025-13-01"}, "date_from"),
        ],
    )
    def test_unparseable_values_raise(self, params, field: str) -> None:
        """
        SCENARIO: A value that cannot be converted
        EXPECTED: ValidationError naming the field
        """
        with pytest.raises(ValidationError) as exc_info:
            parse_query_params(params)

        assert exc_info.value.field == field
