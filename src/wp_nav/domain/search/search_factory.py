# wp_nav/domain/search/search_factory.py
from pydantic import TypeAdapter

from wp_nav.app.protocols import PathPlanner
from wp_nav.config.models import PlannerUnion
from wp_nav.domain.errors import UnknownAlgorithmError
from wp_nav.runtime.registries import make_planner, planner_kinds

_planner_adapter: TypeAdapter = TypeAdapter(PlannerUnion)


def build_planner(cfg: PlannerUnion, *, hooks=None) -> PathPlanner:
    return make_planner(cfg, deps={"hooks": hooks})


def planner_for(kind: str, *, hooks=None, **options) -> PathPlanner:
    """Planner for an algorithm name, e.g. ``planner_for("astar", heuristic="zero")``."""
    if kind not in planner_kinds():
        raise UnknownAlgorithmError(
            f"Unknown planner kind {kind!r}; expected one of {planner_kinds()}"
        )
    cfg = _planner_adapter.validate_python({"kind": kind, **options})
    return build_planner(cfg, hooks=hooks)
