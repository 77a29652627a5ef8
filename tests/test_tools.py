def test_fraction_index(fraction_client):
    response = fraction_client.get("/")
    assert response.status_code == 200
    assert "Fraction Calculator" in response.text
    assert "Measure a shape" in response.text


def test_fraction_simplify(fraction_client):
    response = fraction_client.post("/simplify", data={"numerator": "2", "denominator": "4"})
    assert response.status_code == 200
    assert response.json()["fraction"] == "1/2"


def test_fraction_zero_denominator(fraction_client):
    response = fraction_client.post("/simplify", data={"numerator": "2", "denominator": "0"})
    assert response.status_code == 400
    assert response.json() == {"error": "Denominator cannot be 0"}


def test_fraction_reciprocal(fraction_client):
    response = fraction_client.post("/reciprocal", data={"numerator": "1", "denominator": "2"})
    assert response.status_code == 200
    body = response.json()
    assert (body["numerator"], body["denominator"]) == (2, 1)


def test_fraction_calc(fraction_client):
    response = fraction_client.post(
        "/calc",
        data={
            "left_numerator": "1",
            "left_denominator": "2",
            "operator": "/",
            "right_numerator": "1",
            "right_denominator": "2",
        },
    )
    assert response.status_code == 200
    assert response.json()["fraction"] == "2/2"


def test_fraction_calc_divide_by_zero(fraction_client):
    response = fraction_client.post(
        "/calc",
        data={
            "left_numerator": "1",
            "left_denominator": "2",
            "operator": "div",
            "right_numerator": "0",
            "right_denominator": "2",
        },
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Cannot divide by a zero fraction."}


def test_fraction_gcd_lcm(fraction_client):
    response = fraction_client.post("/gcd-lcm", data={"a": "2", "b": "4"})
    assert response.status_code == 200
    assert response.json()["lcm"] == 4


def test_geometry_index(geometry_client):
    response = geometry_client.get("/")
    assert response.status_code == 200
    assert "triangle right" in response.text


def test_geometry_area(geometry_client):
    response = geometry_client.post("/area", data={"shape": "circle", "radius": "12"})
    assert response.status_code == 200
    assert response.json()["value"] == 452.3893421169302


def test_geometry_perimeter(geometry_client):
    response = geometry_client.post(
        "/perimeter", data={"shape": "triangle", "a": "5.5", "b": "5.5", "c": "5.5"}
    )
    assert response.status_code == 200
    assert response.json()["value"] == 16.5


def test_geometry_circumference_missing_radius(geometry_client):
    response = geometry_client.post("/circumference", data={})
    assert response.status_code == 400
    assert response.json() == {"error": "Radius is required."}


def test_validation_errors_are_normalized(geometry_client):
    response = geometry_client.post(
        "/circumference", data={"radius": "2", "decimals": "many"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input."}


def test_abacus_index_lists_modules(abacus_client):
    response = abacus_client.get("/")
    assert response.status_code == 200
    assert "Fraction Calculator" in response.text
    assert "Geometry Calculator" in response.text


def test_abacus_category(abacus_client):
    response = abacus_client.get("/category/geometry")
    assert response.status_code == 200
    assert "Geometry Calculator" in response.text
    assert abacus_client.get("/category/unknown").status_code == 404


def test_abacus_mounts_modules(abacus_client):
    response = abacus_client.post(
        "/fraction/calc",
        data={
            "left_numerator": "1",
            "left_denominator": "2",
            "operator": "*",
            "right_numerator": "1",
            "right_denominator": "2",
        },
    )
    assert response.status_code == 200
    assert response.json()["fraction"] == "1/4"
