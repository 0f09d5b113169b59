"""
Unit tests for the catalog resolver.

Covers service name/synonym resolution, numeric pass-through, barber
resolution and the combined resolve_planner_args() helper.
"""

from agent.planner.models import (
    Catalog,
    CatalogBarber,
    CatalogService,
    PlannerArgs,
)
from agent.utils.catalog_resolver import (
    build_service_index,
    resolve_barber_id,
    resolve_planner_args,
    resolve_service_ids,
    unresolved_service_names,
)

CORTE = CatalogService(id=1, name="Corte", synonyms=["corte de pelo"])
BARBA = CatalogService(id=2, name="Barba", synonyms=["arreglo de barba"])
JOSE = CatalogBarber(id=2, name="José")
ALEX = CatalogBarber(id=1, name="Alex")


class TestBuildServiceIndex:
    def test_indexes_names_and_synonyms(self):
        index = build_service_index([CORTE, BARBA])

        assert index == {
            "corte": 1,
            "corte de pelo": 1,
            "barba": 2,
            "arreglo de barba": 2,
        }

    def test_first_entry_wins_on_collision(self):
        first = CatalogService(id=1, name="Corte")
        second = CatalogService(id=9, name="CORTÉ")

        assert build_service_index([first, second])["corte"] == 1

    def test_blank_synonyms_ignored(self):
        service = CatalogService(id=4, name="Tinte", synonyms=["  ", ""])

        assert build_service_index([service]) == {"tinte": 4}


class TestResolveServiceIds:
    def test_mixed_request_collapses_to_single_id(self):
        result = resolve_service_ids(["CORTE", "corte de pelo", 1, "inexistente"], [CORTE])

        assert result == [1]

    def test_numeric_ids_pass_through_without_membership_check(self):
        assert resolve_service_ids([42], [CORTE]) == [42]

    def test_accent_insensitive(self):
        service = CatalogService(id=5, name="Depilación de cejas")

        assert resolve_service_ids(["depilacion DE CEJAS"], [service]) == [5]

    def test_partial_names_do_not_match(self):
        assert resolve_service_ids(["cort"], [CORTE]) == []
        assert resolve_service_ids(["corte y barba"], [CORTE, BARBA]) == []

    def test_preserves_first_seen_order(self):
        assert resolve_service_ids(["barba", "corte", 2], [CORTE, BARBA]) == [2, 1]

    def test_booleans_are_dropped(self):
        assert resolve_service_ids([True, "barba"], [CORTE, BARBA]) == [2]

    def test_empty_catalog_keeps_only_numeric_ids(self):
        assert resolve_service_ids(["corte", 7], []) == [7]

    def test_stable_across_runs(self):
        requested = ["barba", 3, "corte de pelo", "barba"]

        first = resolve_service_ids(requested, [CORTE, BARBA])
        second = resolve_service_ids(requested, [CORTE, BARBA])

        assert first == second == [2, 3, 1]


class TestUnresolvedServiceNames:
    def test_reports_unknown_names_once(self):
        names = unresolved_service_names(["corte", "Masaje", 4, "Masaje"], [CORTE])

        assert names == ["Masaje"]

    def test_nothing_missing(self):
        assert unresolved_service_names(["CORTE", 1], [CORTE]) == []


class TestResolveBarberId:
    def test_none_stays_none(self):
        assert resolve_barber_id(None, [JOSE]) is None

    def test_integer_passes_through(self):
        assert resolve_barber_id(99, [JOSE]) == 99

    def test_name_without_accent_matches(self):
        assert resolve_barber_id("jose", [JOSE]) == 2

    def test_unknown_name_is_none(self):
        assert resolve_barber_id("Pedro", [JOSE]) is None

    def test_first_matching_barber_wins(self):
        twin = CatalogBarber(id=7, name="JOSE")

        assert resolve_barber_id("José", [JOSE, twin]) == 2

    def test_partial_name_does_not_match(self):
        assert resolve_barber_id("Jos", [JOSE]) is None


class TestResolvePlannerArgs:
    def test_maps_names_to_ids_and_reports_misses(self):
        catalog = Catalog(services=[CORTE, BARBA], barbers=[ALEX, JOSE])
        args = PlannerArgs(
            barber="josé",
            appointment_date="2025-09-20",
            start_time="10:00:00",
            services=["Corte", "masaje", 2],
        )

        result = resolve_planner_args(args, catalog)

        assert result.args.services == [1, 2]
        assert result.args.barber == 2
        assert result.args.appointment_date == "2025-09-20"
        assert result.args.start_time == "10:00:00"
        assert result.args.end_time is None
        assert result.unresolved_services == ["masaje"]
        assert result.unresolved_barber is None

    def test_unknown_barber_name_is_nulled_and_reported(self):
        catalog = Catalog(barbers=[JOSE])

        result = resolve_planner_args(PlannerArgs(barber="Pedro"), catalog)

        assert result.args.barber is None
        assert result.unresolved_barber == "Pedro"

    def test_resolved_names_only_yield_catalog_ids(self):
        catalog = Catalog(services=[CORTE, BARBA], barbers=[JOSE])
        args = PlannerArgs(services=["pelado", "arreglo de barba", "corte de pelo"])

        result = resolve_planner_args(args, catalog)

        assert set(result.args.services) <= {s.id for s in catalog.services}


class TestCatalogFromPayload:
    def test_missing_catalog_is_empty(self):
        assert Catalog.from_payload(None) == Catalog()

    def test_invalid_catalog_is_empty(self):
        assert Catalog.from_payload({"services": [{"id": "uno", "name": "Corte"}]}) == Catalog()

    def test_duplicate_ids_are_invalid(self):
        payload = {"services": [{"id": 1, "name": "Corte"}, {"id": 1, "name": "Barba"}]}

        assert Catalog.from_payload(payload) == Catalog()

    def test_synonyms_default_to_empty(self):
        catalog = Catalog.from_payload({"services": [{"id": 3, "name": "Cejas"}]})

        assert catalog.services[0].synonyms == []
        assert catalog.barbers == []

    def test_null_synonyms_keep_the_rest_of_the_catalog(self):
        catalog = Catalog.from_payload(
            {
                "services": [
                    {"id": 1, "name": "Corte", "synonyms": None},
                    {"id": 2, "name": "Barba"},
                ],
                "barbers": [{"id": 7, "name": "José"}],
            }
        )

        assert [s.id for s in catalog.services] == [1, 2]
        assert catalog.services[0].synonyms == []
        assert resolve_service_ids(["corte", "barba"], catalog.services) == [1, 2]
        assert resolve_barber_id("jose", catalog.barbers) == 7
