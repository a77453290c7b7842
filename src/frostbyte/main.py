"""
Main entry point for FrostByte.

Runs a headless session paced at the configured tick rate, driven by a
simple autopilot. Rendering hosts drive ``Session`` directly instead.
"""

import asyncio
import logging
import sys
from typing import Optional

from frostbyte.config.settings import SimulationSettings, get_settings
from frostbyte.core.events import Event, EventType
from frostbyte.persistence.highscore import JsonFileStore, KeyValueStore, MemoryStore
from frostbyte.session import Session
from frostbyte.sim.entities import ObstacleKind
from frostbyte.sim.input import InputCommand
from frostbyte.sim.snapshot import RenderSnapshot


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def autopilot(snapshot: RenderSnapshot) -> InputCommand:
    """Dodge the closest tree or rock coming up beneath the skier."""
    player = snapshot.player
    ahead = [
        o for o in snapshot.obstacles
        if o.kind is not ObstacleKind.JUMP
        and 0 < o.y - player.y < 120
        and abs(o.x - player.x) < 40
    ]
    use_powerup = snapshot.held_powerup is not None and snapshot.pursuer.active

    if not ahead:
        return InputCommand(activate=use_powerup)
    nearest = min(ahead, key=lambda o: o.y)
    go_left = nearest.x >= player.x
    return InputCommand(left=go_left, right=not go_left, brake=True, activate=use_powerup)


def run_headless(
    ticks: int,
    seed: Optional[int] = None,
    settings: Optional[SimulationSettings] = None,
    store: Optional[KeyValueStore] = None,
) -> Session:
    """Run an unpaced session for up to ``ticks`` ticks or until it ends."""
    settings = settings or get_settings()
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})
    session = Session(settings=settings, store=store or MemoryStore())

    snapshot = session.snapshot()
    for _ in range(ticks):
        snapshot = session.tick(autopilot(snapshot))
        if session.is_over:
            break
    return session


async def run_paced(session: Session, max_ticks: int) -> None:
    """Tick at the configured rate, like a frame callback would."""
    logger = logging.getLogger(__name__)
    interval = session.settings.tick_seconds
    loop = asyncio.get_running_loop()
    next_frame = loop.time()

    snapshot = session.snapshot()
    for _ in range(max_ticks):
        snapshot = session.tick(autopilot(snapshot))
        if session.is_over:
            break
        next_frame += interval
        await asyncio.sleep(max(0.0, next_frame - loop.time()))

    logger.info(
        f"Run ended: {session.mode.name} at {snapshot.distance:.0f} "
        f"(best {snapshot.best_distance})"
    )


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("FrostByte starting...")

    session = Session(settings=settings, store=JsonFileStore(settings.store_path))

    def on_event(event: Event) -> None:
        if event.type in (EventType.PURSUER_ACTIVATED, EventType.CRASHED, EventType.CAUGHT):
            logger.info(f"[frame {event.frame}] {event.type.name} {event.data}")

    session.event_bus.subscribe_all(on_event)

    try:
        asyncio.run(run_paced(session, settings.max_ticks))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
