"""
Task API Test Suite — HTTP Endpoints
=====================================
Exercises the FastAPI routes through TestClient.

Usage:
    python -m pytest tests/test_server.py -v
    python tests/test_server.py
"""
import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from taskapi.server import create_app, HEALTH_MESSAGE
from taskapi.store import TaskStore


class TestAppFactory(unittest.TestCase):

    def test_uses_injected_store(self):
        store = TaskStore()
        app = create_app(store)
        self.assertIs(app.state.store, store)

    def test_each_app_gets_its_own_store(self):
        a, b = create_app(), create_app()
        self.assertIsNot(a.state.store, b.state.store)


class TestTaskEndpoints(unittest.TestCase):

    def setUp(self):
        self.store = TaskStore()
        self.client = TestClient(create_app(self.store))

    def test_list_empty(self):
        resp = self.client.get("/api/tasks")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_create_returns_task(self):
        resp = self.client.post("/api/tasks", json={"title": "A", "description": "d1"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(),
                         {"id": 1, "title": "A", "description": "d1", "completed": False})

    def test_create_ignores_client_id_and_completed(self):
        resp = self.client.post("/api/tasks",
                                json={"id": 77, "title": "A", "completed": True})
        body = resp.json()
        self.assertEqual(body["id"], 1)
        self.assertFalse(body["completed"])

    def test_create_with_missing_fields(self):
        resp = self.client.post("/api/tasks", json={})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(),
                         {"id": 1, "title": None, "description": None, "completed": False})

    def test_full_scenario(self):
        t1 = self.client.post("/api/tasks", json={"title": "A", "description": "d1"}).json()
        t2 = self.client.post("/api/tasks", json={"title": "B", "description": "d2"}).json()
        self.assertEqual(t1["id"], 1)
        self.assertEqual(t2["id"], 2)

        self.assertEqual(self.client.get("/api/tasks").json(), [t1, t2])

        resp = self.client.delete("/api/tasks/1")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b"")

        self.assertEqual(self.client.get("/api/tasks").json(), [t2])

    def test_delete_unknown_id(self):
        self.client.post("/api/tasks", json={"title": "A", "description": "d1"})
        resp = self.client.delete("/api/tasks/999")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(self.client.get("/api/tasks").json()), 1)

    def test_delete_negative_id_is_noop(self):
        self.client.post("/api/tasks", json={"title": "A", "description": "d1"})
        before = self.client.get("/api/tasks").json()
        resp = self.client.delete("/api/tasks/-1")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b"")
        self.assertEqual(self.client.get("/api/tasks").json(), before)

    def test_create_coerces_scalar_fields(self):
        resp = self.client.post("/api/tasks", json={"title": 5, "description": False})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(),
                         {"id": 1, "title": "5", "description": "false", "completed": False})

    def test_routes_share_the_store(self):
        self.store.create_task("seeded", "")
        self.assertEqual(self.client.get("/api/tasks").json()[0]["title"], "seeded")


class TestErrorHandling(unittest.TestCase):

    def setUp(self):
        self.store = TaskStore()
        self.client = TestClient(create_app(self.store))

    def test_malformed_json(self):
        resp = self.client.post(
            "/api/tasks",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Bad Request")
        self.assertEqual(len(self.store), 0)

    def test_wrong_field_type(self):
        resp = self.client.post("/api/tasks", json={"title": ["not", "text"]})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(len(self.store), 0)

    def test_non_object_body(self):
        resp = self.client.post("/api/tasks", json=[1, 2, 3])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(len(self.store), 0)

    def test_non_integer_delete_id(self):
        self.store.create_task("A", "")
        resp = self.client.delete("/api/tasks/abc")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(len(self.store), 1)


class TestHealthEndpoint(unittest.TestCase):

    def test_health_message(self):
        client = TestClient(create_app())
        resp = client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.text, HEALTH_MESSAGE)
        self.assertTrue(resp.headers["content-type"].startswith("text/plain"))

    def test_health_independent_of_store(self):
        store = TaskStore()
        for i in range(5):
            store.create_task(f"T{i}", "")
        client = TestClient(create_app(store))
        self.assertEqual(client.get("/api/health").text, "Application is running!")


if __name__ == "__main__":
    unittest.main(verbosity=2)
