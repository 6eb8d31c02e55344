import pytest

from air_routes.config import AppConfig, GraphConfig
from air_routes.container import Container
from air_routes.domain.models import Airport
from air_routes.ports.graph import NetworkRepositoryPort
from air_routes.services import RoutePlannerService


def test_register_and_resolve_singleton():
    container = Container(config=AppConfig())
    container.register(NetworkRepositoryPort, lambda: object())

    assert container.is_registered(NetworkRepositoryPort)
    assert container.resolve(NetworkRepositoryPort) is container.resolve(
        NetworkRepositoryPort
    )


def test_register_transient():
    container = Container(config=AppConfig())
    container.register(NetworkRepositoryPort, lambda: object(), singleton=False)

    assert container.resolve(NetworkRepositoryPort) is not container.resolve(
        NetworkRepositoryPort
    )


def test_resolve_unregistered_raises():
    container = Container(config=AppConfig())

    with pytest.raises(KeyError):
        container.resolve(RoutePlannerService)


def test_clear_singletons_and_all():
    container = Container(config=AppConfig())
    container.register(NetworkRepositoryPort, lambda: object())
    first = container.resolve(NetworkRepositoryPort)

    container.clear_singletons()
    assert container.resolve(NetworkRepositoryPort) is not first

    container.clear_all()
    assert not container.is_registered(NetworkRepositoryPort)


def test_default_container_loads_network(tmp_path):
    (tmp_path / "airports.csv").write_text("airport_code\nZRH\nGVA\nBSL\n", encoding="utf-8")
    (tmp_path / "routes.csv").write_text(
        "from_airport,to_airport,weight,directional\nZRH,GVA,45,false\n",
        encoding="utf-8",
    )
    config = AppConfig(graph=GraphConfig(data_dir=tmp_path))

    container = Container.create_default(config)
    planner = container.resolve(RoutePlannerService)

    assert planner is container.resolve(RoutePlannerService)
    assert set(planner.airports()) == {Airport("ZRH"), Airport("GVA"), Airport("BSL")}
    assert planner.find_route(Airport("GVA"), Airport("ZRH")).total_weight == 45
