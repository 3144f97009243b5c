from metric_imperial.routers.pages import render_index


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Metric-Imperial Converter" in response.text
    assert "/api/convert?input=4gal" in response.text


def test_index_lists_unit_pairs():
    html = render_index()
    assert "gal (gallons) &harr; L (liters)" in html
    assert "mi (miles) &harr; km (kilometers)" in html
    assert "lbs (pounds) &harr; kg (kilograms)" in html
