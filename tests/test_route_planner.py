import threading
from dataclasses import dataclass, field
from typing import List

import pytest

from air_routes.domain.errors import (
    GraphError,
    InvalidWeightError,
    NoPathFoundError,
    UnknownEndpointError,
)
from air_routes.domain.models import Airport, Connection
from air_routes.services import RoutePlannerService

ZRH = Airport("ZRH")
GVA = Airport("GVA")
FRA = Airport("FRA")
LHR = Airport("LHR")
BSL = Airport("BSL")


@dataclass
class StaticRepository:
    airports: List[Airport] = field(default_factory=list)
    connections: List[Connection] = field(default_factory=list)

    def list_airports(self):
        return self.airports

    def list_connections(self):
        return self.connections


@pytest.fixture
def planner():
    planner = RoutePlannerService()
    planner.load_network(
        StaticRepository(
            airports=[BSL],
            connections=[
                Connection(ZRH, GVA, 45),
                Connection(ZRH, FRA, 60),
                Connection(FRA, LHR, 80),
                Connection(GVA, LHR, 200, directional=True),
            ],
        )
    )
    return planner


def test_load_network_builds_graph(planner):
    assert set(planner.airports()) == {ZRH, GVA, FRA, LHR, BSL}
    assert planner.airport_count() == 5
    assert planner.edge_count() == 7
    assert planner.has_connection(GVA, LHR)
    assert not planner.has_connection(LHR, GVA)


def test_find_route(planner):
    result = planner.find_route(ZRH, LHR)

    assert result.path == (ZRH, FRA, LHR)
    assert result.total_weight == 140


def test_find_route_errors(planner):
    with pytest.raises(NoPathFoundError):
        planner.find_route(ZRH, BSL)

    with pytest.raises(UnknownEndpointError):
        planner.find_route(ZRH, Airport("JFK"))


def test_mutations_go_through_planner(planner):
    planner.alter_weight(FRA, LHR, 500)
    assert planner.find_route(ZRH, LHR).path == (ZRH, GVA, LHR)

    planner.remove_connection(GVA, LHR, directional=True)
    assert planner.find_route(ZRH, LHR).path == (ZRH, FRA, LHR)

    planner.add_connection(Connection(BSL, ZRH, 20))
    assert planner.find_route(BSL, LHR).total_weight == 580

    planner.remove_airport(ZRH)
    with pytest.raises(NoPathFoundError):
        planner.find_route(BSL, LHR)

    planner.add_airport(ZRH)
    assert ZRH in planner.airports()


def test_rejected_connection_keeps_previous_network(planner):
    bad = StaticRepository(
        connections=[Connection(ZRH, GVA, 45), Connection(GVA, LHR, -3)],
    )
    with pytest.raises(GraphError) as excinfo:
        planner.load_network(bad)

    assert isinstance(excinfo.value.cause, InvalidWeightError)
    assert planner.edge_count() == 7
    assert set(planner.airports()) == {ZRH, GVA, FRA, LHR, BSL}
    assert planner.find_route(ZRH, LHR).total_weight == 140


def test_network_is_not_shared_with_callers():
    planner = RoutePlannerService()

    assert planner.load_network(StaticRepository(airports=[ZRH])) is None
    assert not hasattr(planner, "graph")
    with pytest.raises(TypeError):
        RoutePlannerService(_graph=object())


def test_concurrent_queries_and_mutations(planner):
    errors = []

    def query():
        for _ in range(200):
            try:
                result = planner.find_route(ZRH, LHR)
                assert result.total_weight in (140, 245)
            except Exception as e:  # pragma: no cover - surfaced below
                errors.append(e)

    def mutate():
        for i in range(200):
            planner.alter_weight(FRA, LHR, 80 if i % 2 else 300)

    threads = [threading.Thread(target=query) for _ in range(4)]
    threads.append(threading.Thread(target=mutate))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
