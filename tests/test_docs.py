"""
Tests for the generated OpenAPI document and the explorer page.
"""

from user_api.app.core.config import Settings
from user_api.app.main import create_app


def test_openapi_document(client):
    response = client.get("/doc")
    assert response.status_code == 200
    doc = response.json()

    assert doc["openapi"].startswith("3.1")
    assert doc["info"]["title"] == "User API"
    assert doc["info"]["version"] == "v1"
    assert set(doc["paths"]) == {"/", "/{id}"}
    assert set(doc["paths"]["/"]) == {"get", "post"}
    assert set(doc["paths"]["/{id}"]) == {"put", "delete"}


def test_operations_are_tagged(client):
    doc = client.get("/doc").json()
    for methods in doc["paths"].values():
        for operation in methods.values():
            assert operation["tags"] == ["user"]


def test_documents_request_and_response_shapes(client):
    doc = client.get("/doc").json()
    create = doc["paths"]["/"]["post"]

    assert "201" in create["responses"]
    assert "400" in create["responses"]
    failed_ref = create["responses"]["400"]["content"]["application/json"]["schema"]["$ref"]
    assert failed_ref.endswith("/FailedResponse")

    body_content = create["requestBody"]["content"]
    assert "application/x-www-form-urlencoded" in body_content

    update = doc["paths"]["/{id}"]["put"]
    id_param = update["parameters"][0]
    assert id_param["name"] == "id"
    assert id_param["in"] == "path"
    assert id_param["schema"]["minimum"] == 0

    schemas = doc["components"]["schemas"]
    assert {"UserRead", "UserResponse", "UserListResponse", "FailedResponse"} <= set(schemas)


def test_settings_drive_document_info():
    app = create_app(settings=Settings(log_level="WARNING", project_name="Demo", api_version="2.0"))
    doc = app.openapi()
    assert doc["info"] == {"title": "Demo", "version": "2.0"}


def test_explorer_page(client):
    response = client.get("/ui")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/doc" in response.text
    assert "swagger" in response.text.lower()


def test_redoc_disabled(client):
    assert client.get("/redoc").status_code == 404


def resolve(doc, ref):
    name = ref.rsplit("/", 1)[-1]
    return doc["components"]["schemas"][name]


def test_validation_failures_documented_as_failed_envelope(client):
    doc = client.get("/doc").json()

    for path, methods in doc["paths"].items():
        for method, operation in methods.items():
            assert "422" not in operation["responses"], (method, path)

    for method in ("put", "delete"):
        documented = doc["paths"]["/{id}"][method]["responses"]["400"]
        ref = documented["content"]["application/json"]["schema"]["$ref"]
        schema = resolve(doc, ref)
        assert set(schema["properties"]) == {"success", "message", "errors"}
        assert schema["required"] == ["message"]

    actual = client.put("/abc", data={"name": "X"})
    assert actual.status_code == 400
    schema = resolve(doc, doc["paths"]["/{id}"]["put"]["responses"]["400"]["content"]["application/json"]["schema"]["$ref"])
    assert set(actual.json()) <= set(schema["properties"])
    assert set(schema["required"]) <= set(actual.json())
