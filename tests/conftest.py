import pytest

HEADER = "Nº,Nom,Grau,Metres,Agulla/Paret,Zona,Data,Enllaç"

ROWS = [
    ["2", "Riu", "6a", "15", "Fissura", "Zona1", "01/05/2021", "http://x"],
    ["1", "Pont", "6a+", "10", "Placa", "Zona2", "-", "-"],
    ["3", "Cova", "5+", "20", "Fissura", "Zona1", "-", "-"],
]


def to_csv(rows, header=HEADER):
    return "\n".join([header] + [",".join(r) for r in rows]) + "\n"


@pytest.fixture
def sample_rows():
    return [list(r) for r in ROWS]


@pytest.fixture
def sample_csv():
    return to_csv(ROWS)
