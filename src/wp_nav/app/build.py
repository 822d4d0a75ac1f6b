# wp_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from wp_nav.app.navigator import Navigator
from wp_nav.app.protocols import PathPlanner
from wp_nav.config.models import (
    GraphWorldModel,
    GridWorldModel,
    RandomGridWorldModel,
    ScenarioModel,
)
from wp_nav.domain.entities.cursor import PathCursor
from wp_nav.domain.entities.graph import Graph, NodeKey
from wp_nav.domain.entities.grid import Grid, build_grid, random_grid
from wp_nav.io.recorder import JsonlSink, Recorder
from wp_nav.io.search_logging import SearchLogging
from wp_nav.runtime.hooks import NoopHooks
from wp_nav.runtime.registries import make_cursor, make_planner
from wp_nav.runtime.rng import RNGRegistry


@dataclass
class App:
    graph: Graph
    grid: Grid | None
    planner: PathPlanner
    cursor: PathCursor
    navigator: Navigator | None  # None for an empty graph world
    hooks: object
    recorder: Recorder | None
    start: NodeKey | None
    goal: NodeKey | None


def _graph_world(model: GraphWorldModel, hooks) -> tuple[Graph, NodeKey | None]:
    g = Graph(strict=model.strict, hooks=hooks)
    for wp in model.waypoints:
        g.add_node(wp.id, wp.position, walkable=wp.walkable)
    for link in model.links:
        g.add_link(link.node1, link.node2, bidirectional=link.dir == "bi")
    start = model.start
    if start is None and model.waypoints:
        start = model.waypoints[0].id
    return g, start


def _grid_world(model: GridWorldModel, hooks) -> Grid:
    return build_grid(
        model.pattern,
        spacing=model.spacing,
        y=model.y,
        force_walkable=[model.start, model.goal],
        hooks=hooks,
    )


def _random_grid_world(model: RandomGridWorldModel, scenario: str, hooks) -> Grid:
    rng = RNGRegistry(model.seed, scenario=scenario).substream("grid", model.rows, model.cols)
    mask = random_grid(model.rows, model.cols, model.obstacle_ratio, rng)
    return build_grid(
        mask,
        spacing=model.spacing,
        y=model.y,
        force_walkable=[model.start, model.goal],
        hooks=hooks,
    )


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks (structured logs + analytics records)
    if use_logging and recorder is None:
        recorder = Recorder(JsonlSink())
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) World
    world = model.world
    grid: Grid | None = None
    goal: NodeKey | None = None
    if isinstance(world, GraphWorldModel):
        graph, start = _graph_world(world, hooks)
    else:
        if isinstance(world, RandomGridWorldModel):
            grid = _random_grid_world(world, model.name, hooks)
        else:
            grid = _grid_world(world, hooks)
        graph, start, goal = grid.graph, tuple(world.start), tuple(world.goal)

    # 3) Planner & cursor (inject deps explicitly)
    deps = {"hooks": hooks}
    planner = make_planner(model.planner, deps=deps)
    cursor = make_cursor(model.cursor, deps=deps)

    navigator = Navigator(graph, planner, cursor, start) if start is not None else None

    return App(
        graph=graph,
        grid=grid,
        planner=planner,
        cursor=cursor,
        navigator=navigator,
        hooks=hooks,
        recorder=recorder,
        start=start,
        goal=goal,
    )
