# main.py
import logging
from dataclasses import asdict

from wp_nav.app.build import App, build
from wp_nav.app.compare import compare_planners
from wp_nav.domain.entities.cursor import EndPolicy

logger = logging.getLogger("wp_nav.demo")


def drive(app: App) -> bool:
    """
    Stand-in for a movement controller: jump straight onto each target.
    A clamped path is followed to the goal; a cyclic one is driven for one lap.
    """
    nav = app.navigator
    if not nav.goto(app.goal):
        return False
    if app.cursor.policy is EndPolicy.CYCLIC:
        for _ in range(len(app.cursor.nodes)):
            nav.tick(app.cursor.target_position)
    else:
        while not nav.arrived:
            nav.tick(app.cursor.target_position)
    return True


def run(name: str = "labyrinth", planner: str = "astar", cursor: str = "clamp") -> App:
    # default world is the 7x6 labyrinth, start (0, 0), goal (6, 5)
    app = build(
        {
            "name": name,
            "run_id": f"{name}-demo",
            "planner": {"kind": planner},
            "cursor": {"policy": cursor},
        }
    )

    for report in compare_planners(app.graph, app.start, app.goal, hooks=app.hooks).values():
        logger.info("planner_report", extra={"extra": asdict(report)})

    drive(app)
    nav = app.navigator
    logger.info("stopped", extra={"extra": {"at": nav.current, "arrived": nav.arrived}})
    return app


if __name__ == "__main__":
    run()
