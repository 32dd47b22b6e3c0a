"""Integration tests for the client endpoints."""

from uuid import uuid4

import pytest

from modules.clients.models import Client

pytestmark = pytest.mark.integration

URL = "/api/v1/clients/"


class TestClientCrud:
    def test_create(self, auth_client):
        payload = {"name": " Ana Souza ", "phone": "(11) 98765-4321", "address": "Rua das Flores, 120"}
        response = auth_client.post(URL, payload, format="json")
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Ana Souza"
        assert Client.objects.filter(id=data["id"]).exists()

    def test_create_blank_name(self, auth_client):
        response = auth_client.post(URL, {"name": "", "phone": "", "address": ""}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "name"

    def test_retrieve(self, auth_client, client_record):
        response = auth_client.get(f"{URL}{client_record.id}/")
        assert response.status_code == 200
        assert response.json()["phone"] == "(11) 3344-5566"

    def test_retrieve_missing(self, auth_client):
        response = auth_client.get(f"{URL}{uuid4()}/")
        assert response.status_code == 404
        assert response.json() == {"detail": "Client not found."}

    def test_put_replaces(self, auth_client, client_record):
        response = auth_client.put(
            f"{URL}{client_record.id}/",
            {"name": "Padaria Pão Quente Ltda", "phone": "", "address": "Av. Brasil, 500"},
            format="json",
        )
        assert response.status_code == 200
        client_record.refresh_from_db()
        assert client_record.name == "Padaria Pão Quente Ltda"
        assert client_record.phone == ""

    def test_put_missing(self, auth_client):
        response = auth_client.put(
            f"{URL}{uuid4()}/", {"name": "X", "phone": "", "address": ""}, format="json"
        )
        assert response.status_code == 404

    def test_delete(self, auth_client, client_record):
        assert auth_client.delete(f"{URL}{client_record.id}/").status_code == 204
        assert not Client.objects.exists()

    def test_list_search(self, auth_client, client_record):
        Client.objects.create(name="Escola Aprender", phone="(11) 2233-4455", address="Rua Vergueiro")
        results = auth_client.get(URL, {"search": "vergueiro"}).json()["results"]
        assert [r["name"] for r in results] == ["Escola Aprender"]

    def test_list_q_filter(self, auth_client, client_record):
        results = auth_client.get(URL, {"q": "3344"}).json()["results"]
        assert [r["id"] for r in results] == [str(client_record.id)]


class TestClientOptions:
    def test_options_unpaginated(self, auth_client, client_record):
        response = auth_client.get(f"{URL}options/")
        assert response.status_code == 200
        assert response.json() == [{"id": str(client_record.id), "name": "Padaria Pão Quente"}]

    def test_options_refresh_after_write(
        self, auth_client, client_record, django_capture_on_commit_callbacks
    ):
        auth_client.get(f"{URL}options/")
        with django_capture_on_commit_callbacks(execute=True):
            auth_client.post(URL, {"name": "Ana Souza", "phone": "", "address": ""}, format="json")
        names = [o["name"] for o in auth_client.get(f"{URL}options/").json()]
        assert names == ["Ana Souza", "Padaria Pão Quente"]

    def test_options_stay_cached_until_write_commits(
        self, auth_client, client_record, django_capture_on_commit_callbacks
    ):
        auth_client.get(f"{URL}options/")
        with django_capture_on_commit_callbacks():
            auth_client.post(URL, {"name": "Ana Souza", "phone": "", "address": ""}, format="json")
        names = [o["name"] for o in auth_client.get(f"{URL}options/").json()]
        assert names == ["Padaria Pão Quente"]

    def test_options_refresh_after_delete(
        self, auth_client, client_record, django_capture_on_commit_callbacks
    ):
        auth_client.get(f"{URL}options/")
        with django_capture_on_commit_callbacks(execute=True):
            auth_client.delete(f"{URL}{client_record.id}/")
        assert auth_client.get(f"{URL}options/").json() == []
