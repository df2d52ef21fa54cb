from vies.columns import Direction
from vies.present import is_absolute_url, render_headers, render_row
from vies.state import SortState


def test_render_row_placeholders_and_link():
    cells = render_row(["2", "Riu", "6a", "", "Fissura", "Zona1", "01/05/2021", "http://x.org/p"])
    assert [c["label"] for c in cells][:3] == ["Nº", "Nom", "Grau"]
    assert cells[3]["text"] == "-"
    assert cells[7] == {"label": "Enllaç", "text": "Veure blog", "group": "footer", "href": "http://x.org/p"}
    assert cells[4]["group"] == cells[5]["group"] == "location"
    assert cells[6]["group"] == "footer"
    assert cells[0]["group"] is None


def test_render_short_row_and_non_url_link():
    cells = render_row(["1", "Pont"])
    assert len(cells) == 8
    assert all(c["text"] == "-" for c in cells[2:])
    assert "href" not in render_row(["1", "a", "", "", "", "", "", "blog"])[7]


def test_is_absolute_url():
    assert is_absolute_url("https://blog.example/route")
    assert not is_absolute_url("http:")
    assert not is_absolute_url("www.example.com")
    assert not is_absolute_url("-")


def test_headers_indicator():
    headers = render_headers(SortState(column=2, direction=Direction.ASC))
    assert [h["indicator"] for h in headers] == ["", "", " ▲", "", "", "", "", ""]
    assert [h["sortable"] for h in headers] == [True] * 7 + [False]
    assert render_headers(SortState())[0]["indicator"] == " ▼"
