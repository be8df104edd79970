import pytest

from quantum_labels.config import Settings
from quantum_labels.records import Record

HEADER = "id,draw,equipament,sku,description,qte,supplier"

SAMPLE_CSV = (
    f"{HEADER}\n"
    "1,D1,E1,S1,desc,2,Sup1\n"
    "2,D2,E2,S2,desc2,1,Sup2"
)


class FakeClock:
    def __init__(self, start_ms=100000):
        self.now_ms = start_ms

    def __call__(self):
        return self.now_ms / 1000.0

    def advance_ms(self, ms):
        self.now_ms += ms


def make_record(record_id, qte="1", **fields):
    return Record(id=record_id, qte=qte, **fields)


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def records():
    return [
        make_record("1", qte="2", draw="D-100", equipament="PUMP-01", sku="SKU-A",
                    description="Bearing housing", supplier="Acme"),
        make_record("2", qte="1", draw="D-200", equipament="FAN-02", sku="SKU-B",
                    description="Impeller", supplier="Globex"),
        make_record("3", qte="3", draw="D-300", equipament="PUMP-03", sku="SKU-C",
                    description="Shaft seal", supplier="Initech"),
    ]
