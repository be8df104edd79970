"""
Tests for CSV ingestion and validation.

Run with: pytest tests/test_csv_loader.py -v
"""
import pytest

from quantum_labels.csv_loader import parse
from quantum_labels.errors import (
    CsvFormatError,
    InvalidQuantityError,
    LabelDataError,
    SchemaError,
)
from quantum_labels.records import REQUIRED_HEADERS

from conftest import HEADER


class TestParseValid:
    """Files with every required header and positive quantities."""

    def test_sample_file(self, sample_csv):
        records = parse(sample_csv)
        assert [r.id for r in records] == ["1", "2"]
        first = records[0]
        assert (first.draw, first.equipament, first.sku) == ("D1", "E1", "S1")
        assert (first.description, first.qte, first.supplier) == ("desc", "2", "Sup1")

    def test_values_are_verbatim(self):
        text = f'{HEADER}\n007, D1 ,E1,S1,"Bolt, M8 x 20",2.0,Sup1\n'
        record = parse(text)[0]
        assert record.id == "007"
        assert record.draw == " D1 "
        assert record.description == "Bolt, M8 x 20"
        assert record.qte == "2.0"

    def test_rows_without_id_are_skipped(self):
        text = (
            f"{HEADER}\n"
            "1,D1,E1,S1,desc,2,Sup1\n"
            ",,,,,,\n"
            ",D9,E9,S9,orphan,0,Sup9\n"
            "\n"
            "2,D2,E2,S2,desc2,1,Sup2\n"
        )
        assert [r.id for r in parse(text)] == ["1", "2"]

    def test_columns_in_any_order_with_extras(self):
        text = "supplier,qte,location,description,sku,equipament,draw,id\nSup1,4,Bay 3,desc,S1,E1,D1,A\n"
        record = parse(text)[0]
        assert record.id == "A"
        assert record.qte == "4"
        assert record.extra == {"location": "Bay 3"}

    def test_header_only_file_has_no_records(self):
        assert parse(HEADER + "\n") == []


class TestParseSchema:
    """Missing headers reject the whole file."""

    def test_missing_sku(self):
        text = "id,draw,equipament,description,qte,supplier\n1,D1,E1,desc,2,Sup1\n"
        with pytest.raises(SchemaError) as exc:
            parse(text)
        assert exc.value.header == "sku"
        assert "sku" in str(exc.value)

    def test_first_missing_in_declared_order(self):
        text = "id,draw,description,supplier\n1,D1,desc,Sup1\n"
        with pytest.raises(SchemaError) as exc:
            parse(text)
        assert exc.value.header == "equipament"
        assert exc.value.message == "Cabeçalho faltando: equipament"

    def test_missing_id(self):
        with pytest.raises(SchemaError) as exc:
            parse("draw,equipament,sku,description,qte,supplier\nD1,E1,S1,desc,2,Sup1\n")
        assert exc.value.header == "id"

    def test_empty_text(self):
        with pytest.raises(SchemaError) as exc:
            parse("")
        assert exc.value.header == REQUIRED_HEADERS[0]

    def test_header_names_are_case_sensitive(self):
        with pytest.raises(SchemaError) as exc:
            parse("ID,draw,equipament,sku,description,qte,supplier\n1,D1,E1,S1,desc,2,Sup1\n")
        assert exc.value.header == "id"


class TestParseQuantity:
    """Non-positive or non-numeric quantities reject the whole file."""

    @pytest.mark.parametrize("qte", ["0", "-1", "abc", "", "nan", "inf"])
    def test_invalid_quantity(self, qte):
        text = f"{HEADER}\n1,D1,E1,S1,desc,2,Sup1\n2,D2,E2,S2,desc2,{qte},Sup2\n"
        with pytest.raises(InvalidQuantityError) as exc:
            parse(text)
        assert exc.value.record_id == "2"
        assert exc.value.message == "Quantidade inválida para o item com ID: 2"

    def test_names_first_offending_record(self):
        text = f"{HEADER}\nA,D,E,S,d,1,X\nB,D,E,S,d,0,X\nC,D,E,S,d,-1,X\n"
        with pytest.raises(InvalidQuantityError) as exc:
            parse(text)
        assert exc.value.record_id == "B"

    def test_python_only_number_syntax_is_rejected(self):
        with pytest.raises(InvalidQuantityError) as exc:
            parse(f"{HEADER}\n1,D1,E1,S1,desc,1_0,Sup1\n")
        assert exc.value.record_id == "1"

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse(f"{HEADER}\n1,D1,E1,S1,desc,0,Sup1\n")

    def test_schema_checked_before_quantities(self):
        with pytest.raises(SchemaError):
            parse("id,draw,equipament,description,qte,supplier\n1,D1,E1,desc,0,Sup1\n")


class TestParseFormat:

    def test_unterminated_quote(self):
        text = f'{HEADER}\n1,D1,E1,S1,"broken,2,Sup1\n'
        with pytest.raises(LabelDataError):
            parse(text)

    @pytest.mark.parametrize("extra", [",EXTRA", ",too,many"])
    def test_rows_longer_than_header_are_rejected(self, extra):
        text = f"{HEADER}\n1,D1,E1,S1,desc,2,Sup1{extra}\n"
        with pytest.raises(CsvFormatError):
            parse(text)

    def test_format_error_is_label_data_error(self):
        assert issubclass(CsvFormatError, LabelDataError)
