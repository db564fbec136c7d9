from __future__ import annotations

from conftest import make_user

from mvvm_app.viewmodels.user_detail import UserDetailViewModel


def test_favorite_toggles_and_notifies() -> None:
    vm = UserDetailViewModel(make_user(7))
    avisos = []
    vm.suscribir(lambda: avisos.append(vm.es_favorito))

    assert vm.es_favorito is False
    vm.alternar_favorito()
    vm.alternar_favorito()

    assert avisos == [True, False]
    assert vm.usuario.id == 7
