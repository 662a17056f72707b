import pytest
from rest_framework.test import APIClient

URL = "/api/compile/"


@pytest.fixture
def client():
    return APIClient()


def test_compile_document(client):
    response = client.post(URL, {"document": "1 + 2 * 3\n\n1 +"}, format="json")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == 200
    assert body["data"]["error_count"] == 1
    assert body["data"]["results"] == [
        {
            "line": 1,
            "type": "BINARY_EXPRESSION",
            "tree": "[ BINARY_EXPRESSION +, [ BINARY_EXPRESSION *, [ NUMBER 3 ], [ NUMBER 2 ] ], [ NUMBER 1 ] ]",
            "value": 7,
        },
        {"line": 2, "type": "VOID", "tree": "[ VOID VOID ]", "value": None},
        {
            "line": 3,
            "type": "ERROR",
            "tree": "[COMPILATION ERROR]: Invalid token provided => expected a number literal, got '+' on line 3",
            "value": "[COMPILATION ERROR]: Invalid token provided => expected a number literal, got '+' on line 3",
        },
    ]


def test_blank_document_is_one_void_line(client):
    response = client.post(URL, {"document": ""}, format="json")

    assert response.status_code == 200
    results = response.json()["data"]["results"]
    assert [r["type"] for r in results] == ["VOID"]


def test_non_finite_values_are_strings(client):
    response = client.post(URL, {"document": "0 / 1\n0 / 0"}, format="json")

    values = [r["value"] for r in response.json()["data"]["results"]]
    assert values == ["Infinity", "NaN"]


def test_missing_document(client):
    response = client.post(URL, {}, format="json")

    assert response.status_code == 400
    assert "document" in response.json()


def test_document_too_long(client, settings):
    settings.LINECALC_MAX_DOCUMENT_LENGTH = 5

    response = client.post(URL, {"document": "1 + 2 + 3"}, format="json")

    assert response.status_code == 400
    assert response.json()["document"] == ["document must not exceed 5 characters"]


def test_huge_literal_is_infinity(client):
    response = client.post(URL, {"document": "1" + "0" * 5000}, format="json")

    assert response.status_code == 200
    assert response.json()["data"]["results"][0]["value"] == "Infinity"


def test_runs_without_auth_or_database_apps(settings):
    assert "django.contrib.auth" not in settings.INSTALLED_APPS
    assert "django.contrib.contenttypes" not in settings.INSTALLED_APPS
