from __future__ import annotations

import io

from PIL import Image

from colorhunt.services.colors import COLOR_CATALOG

RED = "あかいろ (Red)"


def png_bytes(color, size=(64, 48)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def test_list_colors(client):
    colors = client.get("/api/colors").json()
    assert colors == [{"name": c.name, "hex": c.hex} for c in COLOR_CATALOG]


def test_random_color_is_from_catalog(client):
    color = client.get("/api/colors/random").json()
    assert color in [{"name": c.name, "hex": c.hex} for c in COLOR_CATALOG]


def test_score_against_catalog_color(client):
    response = client.post("/api/score", json={"color_name": RED, "captured": {"r": 0, "g": 0, "b": 0}})
    assert response.status_code == 200
    assert response.json() == {
        "score": 16,
        "target": "#B7282E",
        "captured": "#000000",
        "rgb": {"r": 0, "g": 0, "b": 0},
    }


def test_score_against_raw_target(client):
    response = client.post("/api/score", json={"target": "#B7282E", "captured": "#b7282e"})
    assert response.json()["score"] == 100


def test_score_rejects_bad_input(client):
    assert client.post("/api/score", json={"color_name": "nope", "captured": "#000000"}).status_code == 400
    assert client.post("/api/score", json={"target": "#B7282E", "captured": "black"}).status_code == 400
    assert client.post("/api/score", json={"captured": "#000000"}).status_code == 400


def test_capture_samples_uploaded_frame(client):
    response = client.post(
        "/api/capture",
        data={"color_name": RED},
        files={"image": ("frame.png", png_bytes((183, 40, 46)), "image/png")},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["score"] == 100
    assert body["rgb"] == {"r": 183, "g": 40, "b": 46}


def test_capture_rejects_unknown_color_and_garbage(client):
    unknown = client.post(
        "/api/capture",
        data={"color_name": "nope"},
        files={"image": ("frame.png", png_bytes((0, 0, 0)), "image/png")},
    )
    garbage = client.post(
        "/api/capture",
        data={"color_name": RED},
        files={"image": ("frame.png", b"not an image", "image/png")},
    )
    assert unknown.status_code == 400
    assert garbage.status_code == 400
    assert garbage.json() == {"error": "Unreadable image"}


def test_config_exposes_constants(client):
    assert client.get("/config").json() == {
        "top_n": 10,
        "sample_window": 10,
        "score_exponent": 0.7,
        "score_multiplier": 1.5,
    }


def test_score_rejects_malformed_body(client):
    response = client.post(
        "/api/score", content=b"{oops", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Missing fields"}
