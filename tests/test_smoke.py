import base64

from fastapi.testclient import TestClient
from rank_snapshots.main import app

client = TestClient(app)

CURRENT = "Name,Countries,Points,Position\r\nJohn Doe,ESP,1200,3\r\nAna,ARG,900,4\r\nNew Face,ITA,100,80"
PRIOR = "Name,Countries,Points,Position\r\nJohn Doe,ESP,1000,7\r\nAna,ARG,950,2"


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_normalize_repairs_names():
    raw = "Name Countries Points Position\nJuan PeÃ±a  ESP 1200 3\nSolo  700 6\n".encode("utf-8")

    files = {"file": ("rank_full-UTF-8.txt", raw, "text/plain")}
    r = client.post("/normalize", files=files)
    assert r.status_code == 200

    data = r.json()
    out_text = base64.b64decode(data["normalized_csv"]["content_b64"]).decode("utf-8")
    assert out_text == "Name,Countries,Points,Position\r\nJuan Peña,ESP,1200,3\r\nSolo,,700,6"
    assert data["report"]["summary"]["rows"] == 2
    assert data["report"]["summary"]["repaired_names"] == 1
    assert data["report"]["summary"]["injected_countries"] == 1


def test_normalize_rejects_other_files():
    files = {"file": ("rank.pdf", b"%PDF", "application/pdf")}
    r = client.post("/normalize", files=files)
    assert r.status_code == 422


def test_normalize_reports_malformed_line():
    raw = b"Name Countries Points Position\nno separator\n"
    r = client.post("/normalize", files={"file": ("rank.txt", raw, "text/plain")})
    assert r.status_code == 422
    assert "line 2" in r.json()["detail"]


def test_normalize_with_wider_separator():
    raw = b"Name Countries Points Position\nJohn Doe   ESP 1200 3\n"
    r = client.post(
        "/normalize",
        files={"file": ("rank.txt", raw, "text/plain")},
        data={"separator_width": "3"},
    )
    assert r.status_code == 200
    assert r.json()["report"]["normalizations"]["separator"]["width"] == 3


def test_snapshot_summary():
    files = {"file": ("rank.csv", CURRENT.encode("utf-8"), "text/csv")}
    r = client.post("/snapshot", files=files, data={"top": "2"})
    assert r.status_code == 200
    data = r.json()
    assert data["records"] == 3
    assert data["countries"] == ["ARG", "ESP", "ITA"]
    assert data["top_countries"] == ["ARG", "ESP"]
    assert data["country"] is None
    assert data["country_records"] == []


def test_snapshot_lists_one_country():
    table = CURRENT + "\r\nLuis,ESP,50,90"
    files = {"file": ("rank.csv", table.encode("utf-8"), "text/csv")}
    r = client.post("/snapshot", files=files, data={"country": "ESP"})
    assert r.status_code == 200

    data = r.json()
    assert data["country"] == "ESP"
    assert [row["name"] for row in data["country_records"]] == ["John Doe", "Luis"]
    assert data["country_records"][0]["points"] == 1200
    assert data["country_records"][0]["points_delta_display"] == "-"


def test_compare_snapshots():
    files = {
        "current": ("rank.csv", CURRENT.encode("utf-8"), "text/csv"),
        "prior": ("Ranking-Male-11-09-2023.csv", PRIOR.encode("utf-8"), "text/csv"),
    }
    r = client.post("/compare", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["label"] == "2023-09-11"
    assert data["matched"] == 2

    john, ana, new = data["records"]
    assert john["history"] == [{"label": "2023-09-11", "points": 1000, "position": 7}]
    assert john["points_delta_display"] == "+200"
    assert john["position_delta_display"] == "+4"
    assert ana["points_delta_display"] == "-50"
    assert ana["position_delta_display"] == "-2"
    assert new["points_delta"] is None
    assert new["points_delta_display"] == "-"


def test_compare_rejects_bad_table():
    files = {
        "current": ("rank.csv", b"Name,Countries,Points,Position\r\nA,ESP,many,1", "text/csv"),
        "prior": ("prior.csv", PRIOR.encode("utf-8"), "text/csv"),
    }
    r = client.post("/compare", files=files, data={"label": "x"})
    assert r.status_code == 422


def test_normalize_rejects_zero_separator_width():
    raw = b"Name Countries Points Position\nJohn Doe  ESP 1200 3\n"
    r = client.post(
        "/normalize",
        files={"file": ("rank.txt", raw, "text/plain")},
        data={"separator_width": "0"},
    )
    assert r.status_code == 422
    assert "separator_width" in r.json()["detail"]
