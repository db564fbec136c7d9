from __future__ import annotations

import pytest

from mvvm_app.core.errors import FetchError
from mvvm_app.infrastructure.endpoints import APIEndpoints, UsersPage
from mvvm_app.infrastructure.repositories import UserRepository


class _FakeClient:
    """Devuelve un payload fijo aplicando el decodificador real."""

    def __init__(self, payload) -> None:
        self.payload = payload
        self.urls: list[str] = []

    def obtener(self, url, decodificar):
        self.urls.append(url)
        try:
            return decodificar(self.payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise FetchError("Formato inesperado en la respuesta del servicio", exc) from exc


def test_users_url_shape() -> None:
    endpoints = APIEndpoints("https://api.test/")

    assert endpoints.url_para(UsersPage(1)) == "https://api.test/users?_page=1"
    assert endpoints.url_para(UsersPage(12)) == "https://api.test/users?_page=12"


def test_default_base_points_to_jsonplaceholder() -> None:
    assert APIEndpoints().url_para(UsersPage(2)) == "https://jsonplaceholder.typicode.com/users?_page=2"


@pytest.mark.parametrize("pagina", [0, -1, True, 1.5, "2"])
def test_page_must_be_a_positive_integer(pagina) -> None:
    with pytest.raises(ValueError):
        UsersPage(pagina)


def test_unknown_request_is_rejected() -> None:
    with pytest.raises(TypeError):
        APIEndpoints().url_para("users")  # type: ignore[arg-type]


def test_repository_decodes_user_records_in_order() -> None:
    client = _FakeClient(
        [
            {"id": 2, "name": "Ervin Howell", "email": "Shanna@melissa.tv", "username": "Antonette"},
            {"id": 1, "name": "Leanne Graham", "email": "Sincere@april.biz"},
        ]
    )
    repo = UserRepository(client, APIEndpoints("https://api.test"))

    usuarios = repo.obtener_usuarios(3)

    assert client.urls == ["https://api.test/users?_page=3"]
    assert [(u.id, u.nombre, u.email) for u in usuarios] == [
        (2, "Ervin Howell", "Shanna@melissa.tv"),
        (1, "Leanne Graham", "Sincere@april.biz"),
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1, "name": "Ana", "email": "a@b.com"},
        [{"id": 1, "name": "Ana"}],
        [{"id": "1", "name": "Ana", "email": "a@b.com"}],
        [{"id": 1, "name": None, "email": "a@b.com"}],
        ["no es un objeto"],
    ],
)
def test_repository_rejects_unexpected_shapes(payload) -> None:
    repo = UserRepository(_FakeClient(payload), APIEndpoints("https://api.test"))

    with pytest.raises(FetchError):
        repo.obtener_usuarios(1)
