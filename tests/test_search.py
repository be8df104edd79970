from quantum_labels.search import filter_records

from conftest import make_record


class TestFilterRecords:

    def test_empty_query_returns_everything(self, records):
        result = filter_records(records, "")
        assert result == records
        assert result is not records

    def test_matches_any_field_case_insensitively(self, records):
        assert [r.id for r in filter_records(records, "pump")] == ["1", "3"]
        assert [r.id for r in filter_records(records, "GLOBEX")] == ["2"]
        assert [r.id for r in filter_records(records, "sku-c")] == ["3"]

    def test_matches_quantity_and_id(self, records):
        assert [r.id for r in filter_records(records, "3")] == ["3"]

    def test_matches_extra_columns(self):
        records = [
            make_record("1", extra={"location": "Bay 3"}),
            make_record("2", extra={"location": "Yard"}),
        ]
        assert [r.id for r in filter_records(records, "bay")] == ["1"]

    def test_no_match(self, records):
        assert filter_records(records, "zzz") == []

    def test_does_not_mutate_input(self, records):
        before = list(records)
        filter_records(records, "pump")
        assert records == before
