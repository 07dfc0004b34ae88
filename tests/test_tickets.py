# tests/test_tickets.py
TICKET = {
    "nombre": "Ana",
    "fecha": "2024-05-01",
    "hora": "10:30",
    "mensaje": "La impresora no funciona",
    "dni": "12345678",
}


def test_create_ticket_returns_record(client):
    r = client.post("/api/ticket", json=TICKET)
    assert r.status_code == 200
    data = r.json()
    assert isinstance(data["id"], int)
    assert data["createdAt"]
    assert data["updatedAt"]
    for field, value in TICKET.items():
        assert data[field] == value


def test_create_ticket_missing_field_persists_nothing(client):
    for field in TICKET:
        payload = {k: v for k, v in TICKET.items() if k != field}
        r = client.post("/api/ticket", json=payload)
        assert r.status_code == 500
        assert r.json() == {"error": "Error al crear el ticket"}

    r = client.get("/api/ticket", params={"dni": TICKET["dni"]})
    assert r.status_code == 200
    assert r.json() == []


def test_create_ticket_bad_date(client):
    r = client.post("/api/ticket", json={**TICKET, "fecha": "mañana"})
    assert r.status_code == 500
    assert r.json() == {"error": "Error al crear el ticket"}


def test_create_ticket_accepts_numeric_dni(client):
    r = client.post("/api/ticket", json={**TICKET, "dni": 12345678})
    assert r.status_code == 200
    assert r.json()["dni"] == "12345678"


def test_list_by_dni_newest_first(client):
    ids = []
    for i in range(3):
        r = client.post("/api/ticket", json={**TICKET, "mensaje": f"m{i}"})
        assert r.status_code == 200
        ids.append(r.json()["id"])
    other = client.post("/api/ticket", json={**TICKET, "dni": "87654321"}).json()

    r = client.get("/api/ticket", params={"dni": "12345678"})
    assert r.status_code == 200
    data = r.json()
    assert [t["id"] for t in data] == list(reversed(ids))
    assert other["id"] not in {t["id"] for t in data}
    assert [t["mensaje"] for t in data] == ["m2", "m1", "m0"]


def test_list_round_trip_matches_create(client):
    created = client.post("/api/ticket", json=TICKET).json()
    listed = client.get("/api/ticket", params={"dni": TICKET["dni"]}).json()
    assert listed == [created]


def test_list_requires_dni(client):
    r = client.get("/api/ticket")
    assert r.status_code == 400
    assert r.json() == {"error": "dni requerido para filtrar tickets"}

    r2 = client.get("/api/ticket", params={"dni": ""})
    assert r2.status_code == 400


def test_delete_ticket_then_404(client):
    tid = client.post("/api/ticket", json=TICKET).json()["id"]

    r = client.delete(f"/api/ticket/{tid}")
    assert r.status_code == 200
    assert r.json() == {"message": "Ticket eliminado"}

    r2 = client.delete(f"/api/ticket/{tid}")
    assert r2.status_code == 404
    assert r2.json() == {"error": "Ticket no encontrado"}


def test_delete_unknown_ticket_returns_404(client):
    r = client.delete("/api/ticket/9999999")
    assert r.status_code == 404
    assert r.json()["error"] == "Ticket no encontrado"


def test_list_store_failure_returns_500(client, drop_table):
    drop_table("tickets")
    r = client.get("/api/ticket", params={"dni": "12345678"})
    assert r.status_code == 500
    assert r.json() == {"error": "Error al obtener los tickets"}


def test_create_ticket_without_body(client):
    r = client.post("/api/ticket")
    assert r.status_code == 500
    assert r.json() == {"error": "Error al crear el ticket"}


def test_create_ticket_non_text_field(client):
    r = client.post("/api/ticket", json={**TICKET, "nombre": {"a": 1}})
    assert r.status_code == 500
    assert r.json() == {"error": "Error al crear el ticket"}

    r2 = client.post("/api/ticket", json=[TICKET])
    assert r2.status_code == 500
    assert client.get("/api/ticket", params={"dni": TICKET["dni"]}).json() == []


def test_create_ticket_store_failure(client, drop_table):
    drop_table("tickets")
    r = client.post("/api/ticket", json=TICKET)
    assert r.status_code == 500
    assert r.json() == {"error": "Error al crear el ticket"}


def test_delete_ticket_non_integer_id(client):
    r = client.delete("/api/ticket/abc")
    assert r.status_code == 500
    assert r.json() == {"error": "Error al borrar el ticket"}


def test_delete_ticket_store_failure(client, drop_table):
    drop_table("tickets")
    r = client.delete("/api/ticket/1")
    assert r.status_code == 500
    assert r.json() == {"error": "Error al borrar el ticket"}
