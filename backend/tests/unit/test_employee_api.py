from __future__ import annotations

import json

JSON_HEADERS = {"Content-Type": "application/json"}
XML_HEADERS = {"Content-Type": "application/xml"}


def test_list_json_after_form_create(client):
    client.post("/employees", data={"firstName": "Ada", "lastName": "Lovelace", "department": "R&D"})

    response = client.get("/api/employees/json")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    data = response.json()
    assert len(data) == 1
    assert data[0]["fullName"] == "Ada Lovelace"
    assert data[0]["department"] == "R&D"
    assert data[0]["position"] is None
    assert data[0]["phoneNumber"] is None
    assert "createdAt" not in data[0]


def test_list_xml(client):
    client.post("/employees", data={"firstName": "Ada", "lastName": "Lovelace", "department": "R&D"})

    response = client.get("/api/employees/xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert response.text.startswith("<ArrayOfEmployee>")
    assert "<fullName>Ada Lovelace</fullName>" in response.text
    assert "<department>R&amp;D</department>" in response.text


def test_list_xml_empty(client):
    response = client.get("/api/employees/xml")

    assert response.text == "<ArrayOfEmployee />"


def test_post_json_creates_employee(client):
    body = json.dumps({"firstName": "Alan", "lastName": "Turing", "position": "Fellow"})

    response = client.post("/api/employees/json", content=body, headers=JSON_HEADERS)

    assert response.status_code == 200
    assert len(response.json()["created"]) == 1
    data = client.get("/api/employees/json").json()
    assert data[0]["fullName"] == "Alan Turing"
    assert data[0]["position"] == "Fellow"


def test_post_json_ignores_incoming_id(client):
    body = json.dumps({"id": 4242, "firstName": "Alan", "lastName": "Turing"})

    response = client.post("/api/employees/json", content=body, headers=JSON_HEADERS)

    assert response.json()["created"] != [4242]


def test_post_json_empty_body(client):
    response = client.post("/api/employees/json", content="", headers=JSON_HEADERS)

    assert response.status_code == 400
    assert response.json()["detail"] == "Empty or null JSON data"


def test_post_json_malformed(client):
    response = client.post("/api/employees/json", content="{not valid json", headers=JSON_HEADERS)

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid JSON format:")


def test_post_json_full_name_only_is_rejected(client):
    body = json.dumps({"fullName": "Ada Lovelace", "department": "R&D"})

    response = client.post("/api/employees/json", content=body, headers=JSON_HEADERS)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert {e["field"] for e in detail["invalid"][0]["errors"]} == {"firstName", "lastName"}
    assert client.get("/api/employees/json").json() == []


def test_post_xml_creates_employees(client):
    xml = (
        "<ArrayOfEmployee>"
        "<Employee><firstName>Ada</firstName><lastName>Lovelace</lastName><department>R&amp;D</department></Employee>"
        "<Employee><firstName>Alan</firstName><lastName>Turing</lastName></Employee>"
        "</ArrayOfEmployee>"
    )

    response = client.post("/api/employees/xml", content=xml, headers=XML_HEADERS)

    assert response.status_code == 200
    assert len(response.json()["created"]) == 2
    names = sorted(s["fullName"] for s in client.get("/api/employees/json").json())
    assert names == ["Ada Lovelace", "Alan Turing"]


def test_post_xml_single_element(client):
    xml = "<Employee><firstName>Ada</firstName><lastName>Lovelace</lastName></Employee>"

    response = client.post("/api/employees/xml", content=xml, headers=XML_HEADERS)

    assert response.status_code == 200
    assert len(response.json()["created"]) == 1


def test_post_xml_empty_body(client):
    response = client.post("/api/employees/xml", content="", headers=XML_HEADERS)

    assert response.status_code == 400
    assert response.json()["detail"] == "Empty or null XML data"


def test_post_xml_malformed(client):
    response = client.post("/api/employees/xml", content="<ArrayOfEmployee>", headers=XML_HEADERS)

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid XML data:")


def test_post_xml_with_one_incomplete_record_stores_nothing(client):
    xml = (
        "<ArrayOfEmployee>"
        "<Employee><firstName>Ada</firstName><lastName>Lovelace</lastName></Employee>"
        "<Employee><fullName>Alan Turing</fullName></Employee>"
        "</ArrayOfEmployee>"
    )

    response = client.post("/api/employees/xml", content=xml, headers=XML_HEADERS)

    assert response.status_code == 400
    assert response.json()["detail"]["invalid"][0]["index"] == 1
    assert client.get("/api/employees/json").json() == []


def test_get_xml_output_is_accepted_back_with_names(client):
    client.post("/employees", data={"firstName": "Ada", "lastName": "Lovelace"})
    exported = client.get("/api/employees/xml").text
    enriched = exported.replace("</Employee>", "<firstName>Ada</firstName><lastName>Lovelace</lastName></Employee>")

    response = client.post("/api/employees/xml", content=enriched, headers=XML_HEADERS)

    assert response.status_code == 200
    assert len(client.get("/api/employees/json").json()) == 2


def test_post_json_literal_null(client):
    response = client.post("/api/employees/json", content="null", headers=JSON_HEADERS)

    assert response.status_code == 400
    assert response.json()["detail"] == "Empty or null JSON data"


def test_post_json_trims_padded_names(client):
    body = json.dumps({"firstName": "  Ada ", "lastName": " Lovelace", "department": "   "})

    response = client.post("/api/employees/json", content=body, headers=JSON_HEADERS)

    assert response.status_code == 200
    data = client.get("/api/employees/json").json()
    assert data[0]["fullName"] == "Ada Lovelace"
    assert data[0]["department"] is None


def test_post_json_with_control_character_is_rejected(client):
    body = json.dumps({"firstName": "Ada", "lastName": "Lovelace", "phoneNumber": "555\u000b0100"})

    response = client.post("/api/employees/json", content=body, headers=JSON_HEADERS)

    assert response.status_code == 400
    errors = response.json()["detail"]["invalid"][0]["errors"]
    assert errors == [{"field": "phoneNumber", "message": "Phone number contains unsupported control characters."}]
    assert client.get("/api/employees/json").json() == []
    assert client.get("/api/employees/xml").text == "<ArrayOfEmployee />"


def test_post_xml_keeps_carriage_returns(client):
    xml = (
        "<Employee><firstName>Ada</firstName><lastName>Lovelace</lastName>"
        "<position>Analyst&#13;\nEngineer</position></Employee>"
    )

    response = client.post("/api/employees/xml", content=xml, headers=XML_HEADERS)

    assert response.status_code == 200
    assert client.get("/api/employees/json").json()[0]["position"] == "Analyst\r\nEngineer"
    assert "<position>Analyst&#13;\nEngineer</position>" in client.get("/api/employees/xml").text
