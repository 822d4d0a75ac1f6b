from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from wp_nav.domain.entities.grid import LABYRINTH_PATTERN

WaypointId = str | int


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # per-node expansion logs
    sample_every: int = Field(default=1, ge=1)


# ----------------- WORLDS ---------------------


class WaypointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: WaypointId
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    walkable: bool = True


class LinkModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    node1: WaypointId
    node2: WaypointId
    dir: Literal["uni", "bi"] = "uni"


class GraphWorldModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["graph"] = "graph"
    waypoints: list[WaypointModel] = Field(default_factory=list)
    links: list[LinkModel] = Field(default_factory=list)
    strict: bool = False  # raise on links naming unknown waypoints
    start: WaypointId | None = None

    @model_validator(mode="after")
    def _check_start(self):
        ids = {wp.id for wp in self.waypoints}
        if self.start is not None and self.start not in ids:
            raise ValueError(f"start {self.start!r} is not a waypoint id")
        return self


class GridWorldModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid"] = "grid"
    pattern: list[list[bool]] = Field(default_factory=lambda: [list(r) for r in LABYRINTH_PATTERN])
    spacing: float = 5.0
    y: float = 0.0
    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] | None = None  # None => bottom-right cell

    @field_validator("spacing")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @model_validator(mode="after")
    def _check_shape(self):
        if not self.pattern or not self.pattern[0]:
            raise ValueError("grid pattern must have at least one row and one column")
        cols = len(self.pattern[0])
        if any(len(row) != cols for row in self.pattern):
            raise ValueError("grid pattern rows must all have the same length")
        rows = len(self.pattern)
        if self.goal is None:
            self.goal = (rows - 1, cols - 1)
        for name, (r, c) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= r < rows and 0 <= c < cols):
                raise ValueError(f"{name} {(r, c)} is outside a {rows}x{cols} grid")
        return self


class RandomGridWorldModel(BaseModel):
    """Obstacles drawn from a seeded stream; start and goal stay walkable."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["random_grid"] = "random_grid"
    rows: int = Field(default=10, ge=1)
    cols: int = Field(default=10, ge=1)
    obstacle_ratio: float = Field(default=0.25, ge=0.0, lt=1.0)
    seed: int = 0
    spacing: float = Field(default=5.0, gt=0.0)
    y: float = 0.0
    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] | None = None

    @model_validator(mode="after")
    def _check_cells(self):
        if self.goal is None:
            self.goal = (self.rows - 1, self.cols - 1)
        for name, (r, c) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(f"{name} {(r, c)} is outside a {self.rows}x{self.cols} grid")
        return self


WorldUnion = Annotated[
    GraphWorldModel | GridWorldModel | RandomGridWorldModel,
    Field(discriminator="kind"),
]

# ----------------- PLANNERS ---------------------


class BfsPlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


class DfsPlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dfs"] = "dfs"


class DfsRecursivePlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dfs_recursive"] = "dfs_recursive"
    max_depth: int = Field(default=512, ge=1)


class AStarPlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: Literal["squared_euclidean", "euclidean", "manhattan", "zero"] = "squared_euclidean"
    tie_break: Literal["h_then_insertion", "insertion"] = "h_then_insertion"


class TestPathPlannerModel(BaseModel):
    """Stub planner returning [start, goal]."""

    __test__ = False
    model_config = ConfigDict(extra="forbid")
    kind: Literal["test_path"] = "test_path"


PlannerUnion = Annotated[
    BfsPlannerModel
    | DfsPlannerModel
    | DfsRecursivePlannerModel
    | AStarPlannerModel
    | TestPathPlannerModel,
    Field(discriminator="kind"),
]

# ----------------- CONSUMPTION ---------------------


class CursorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    policy: Literal["clamp", "cyclic"] = "clamp"
    accuracy: float = 0.5
    planar: bool = True

    @field_validator("accuracy")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    world: WorldUnion = Field(default_factory=GridWorldModel)
    planner: PlannerUnion = Field(default_factory=BfsPlannerModel)
    cursor: CursorModel = CursorModel()
