"""Simulation engine: the single writer of the game state.

FarmEngine owns one GameState and exposes every way to change it: player
intents (plant, harvest, craft, ...), the periodic ``tick`` and
``save``/``load``. Each intent runs against a deep copy of the state and is
committed only if it finishes without raising, so a rejected intent leaves
the state exactly as it was. Preconditions are always checked against the
state current at apply time.

Notifications are produced inside a transaction and delivered to
subscribers only after it commits. A rejected intent delivers a single
ERROR notification unless it was issued with ``quiet=True`` (repeat
issuance during a drag gesture); the typed exception is raised either way.

Example:
    >>> engine = FarmEngine()
    >>> engine.subscribe(lambda note: print(note.text))
    >>> engine.plant(6 * 18 + 6, ItemId.WHEAT)
    >>> engine.harvest(6 * 18 + 6, now=time.time() + 60)
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any

from pixel_farm.core.config import Settings, get_settings
from pixel_farm.core.constants import (
    EXPANSION_COSTS,
    INITIAL_WEATHER_SECONDS,
    MAX_EXPANSION_LEVEL,
)
from pixel_farm.core.exceptions import (
    EmptyPlotError,
    InsufficientFundsError,
    ItemLockedError,
    MascotAlreadyOwnedError,
    MascotNotOwnedError,
    MaxExpansionReachedError,
    MissingIngredientsError,
    MissingItemsError,
    NotACropError,
    NotReadyError,
    OutOfBoundsError,
    PixelFarmError,
    UnknownOrderError,
)
from pixel_farm.core.logging import get_logger
from pixel_farm.engine import events, grid, orders
from pixel_farm.engine.chance import Chance
from pixel_farm.engine.modifiers import (
    adjusted_craft_seconds,
    adjusted_order_money,
    adjusted_xp,
    harvest_yield,
    ready_at,
)
from pixel_farm.engine.reconcile import OfflineReport, reconcile
from pixel_farm.engine.weather import advance_clock, next_weather
from pixel_farm.models.catalog import ITEMS, get_event, get_item, get_mascot, get_recipe
from pixel_farm.models.enums import ItemId, NotificationKind, WeatherType
from pixel_farm.models.game_state import GameState
from pixel_farm.models.progression import is_unlocked
from pixel_farm.storage import snapshot as snapshot_io


logger = get_logger(__name__)


# =============================================================================
# Results and Notifications
# =============================================================================


@dataclass(frozen=True)
class Notification:
    """A human-readable message for the presentation layer.

    Attributes:
        kind: Category the UI can style on.
        text: Display text.
        timestamp: When the notification was produced.
    """

    kind: NotificationKind
    text: str
    timestamp: float


@dataclass(frozen=True)
class HarvestResult:
    """Outcome of harvesting one crop.

    Attributes:
        index: Root plot that was harvested.
        item_id: Crop harvested.
        quantity: Units added to the inventory.
        xp_gained: XP from the crop itself, after mascot bonus.
        event_completed: Whether this harvest completed the active event.
        leveled_up: Whether the player crossed a level threshold.
        level: Player level after the harvest.
    """

    index: int
    item_id: ItemId
    quantity: int
    xp_gained: int
    event_completed: bool = False
    leveled_up: bool = False
    level: int = 1


@dataclass(frozen=True)
class HarvestSummary:
    """Outcome of harvesting every ready crop at once."""

    results: list[HarvestResult] = field(default_factory=list)
    leveled_up: bool = False
    level: int = 1

    @property
    def count(self) -> int:
        return len(self.results)

    @property
    def total_xp(self) -> int:
        return sum(result.xp_gained for result in self.results)

    @property
    def totals(self) -> dict[ItemId, int]:
        """Units gained per crop."""
        gained: dict[ItemId, int] = {}
        for result in self.results:
            gained[result.item_id] = gained.get(result.item_id, 0) + result.quantity
        return gained


@dataclass(frozen=True)
class CraftResult:
    """Outcome of a craft.

    ``craft_seconds`` is the mascot-adjusted duration the UI may animate;
    the output is credited immediately.
    """

    recipe_id: str
    item_id: ItemId
    xp_gained: int
    craft_seconds: float
    leveled_up: bool = False
    level: int = 1


@dataclass(frozen=True)
class OrderResult:
    """Outcome of fulfilling an order."""

    order_id: str
    money_gained: int
    xp_gained: int
    leveled_up: bool = False
    level: int = 1


NotificationCallback = Callable[[Notification], None]


@dataclass
class _Transaction:
    """Draft state and pending notifications of one intent."""

    state: GameState
    now: float
    notifications: list[Notification] = field(default_factory=list)

    def notify(self, kind: NotificationKind, text: str) -> None:
        self.notifications.append(Notification(kind=kind, text=text, timestamp=self.now))


def new_game_state(now: float) -> GameState:
    """A fresh farm: starting money and seeds, centre ring unlocked."""
    return GameState(
        plots=grid.build_plots(expansion_level=0),
        weather=WeatherType.SUNNY,
        weather_end_time=now + INITIAL_WEATHER_SECONDS,
        last_save_time=now,
    )


# =============================================================================
# Farm Engine
# =============================================================================


class FarmEngine:
    """Owner of one farm's GameState.

    Attributes:
        state: Deep copy of the current state; mutating it has no effect.
        settings: Active simulation settings.
    """

    def __init__(
        self,
        state: GameState | None = None,
        *,
        settings: Settings | None = None,
        chance: Chance | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the engine.

        Args:
            state: Starting state. A new game is created if None.
            settings: Settings to use. Defaults to the cached global settings.
            chance: Random source. Seeded from settings if None.
            clock: Returns the current timestamp when an intent gets no ``now``.
        """
        self._settings = settings or get_settings()
        self._chance = chance or Chance(seed=self._settings.simulation.seed)
        self._clock = clock
        self._state = state.model_copy(deep=True) if state is not None else new_game_state(clock())
        self._subscribers: list[NotificationCallback] = []

        logger.info(
            "FarmEngine initialized",
            money=self._state.money,
            level=self._state.level,
            expansion_level=self._state.expansion_level,
        )

    @property
    def state(self) -> GameState:
        """Get a read-only copy of the current state."""
        return self._state.model_copy(deep=True)

    @property
    def settings(self) -> Settings:
        return self._settings

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------

    def subscribe(self, callback: NotificationCallback) -> Callable[[], None]:
        """Register a notification callback.

        Returns:
            A function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _emit(self, notifications: list[Notification]) -> None:
        for notification in notifications:
            for callback in list(self._subscribers):
                try:
                    callback(notification)
                except Exception:
                    logger.exception("Notification callback failed", kind=notification.kind)

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def _now(self, now: float | None) -> float:
        return self._clock() if now is None else now

    @contextmanager
    def _transaction(self, intent: str, now: float, *, quiet: bool = False) -> Iterator[_Transaction]:
        """Run an intent against a draft and commit it only on success."""
        tx = _Transaction(state=self._state.model_copy(deep=True), now=now)
        try:
            yield tx
        except PixelFarmError as exc:
            logger.debug("Intent rejected", intent=intent, reason=exc.message, details=exc.details)
            if not quiet:
                self._emit([Notification(NotificationKind.ERROR, exc.message, now)])
            raise
        self._state = tx.state
        self._emit(tx.notifications)

    def _announce_level(self, tx: _Transaction, level_before: int) -> bool:
        level = tx.state.level
        if level <= level_before:
            return False
        tx.notify(NotificationKind.LEVEL_UP, f"Level Up! You are now level {level}")
        logger.info("Level up", level=level, xp=tx.state.xp)
        return True

    @staticmethod
    def _require_funds(state: GameState, cost: int, message: str) -> None:
        if state.money < cost:
            raise InsufficientFundsError(message, required=cost, available=state.money)

    @staticmethod
    def _shortfall(state: GameState, required: dict[ItemId, int]) -> dict[str, int]:
        return {
            str(item_id): count - state.count(item_id)
            for item_id, count in required.items()
            if state.count(item_id) < count
        }

    @staticmethod
    def _debit_items(state: GameState, required: dict[ItemId, int]) -> None:
        for item_id, count in required.items():
            state.inventory[item_id] = state.count(item_id) - count

    # -------------------------------------------------------------------------
    # Planting and Harvesting
    # -------------------------------------------------------------------------

    def plant(
        self,
        index: int,
        item_id: str,
        *,
        now: float | None = None,
        quiet: bool = False,
    ) -> list[int]:
        """Plant a crop with its root at ``index`` and pay the seed cost.

        Args:
            index: Root plot index.
            item_id: Crop to plant.
            now: Planting timestamp; defaults to the engine clock.
            quiet: Suppress the ERROR notification on rejection.

        Returns:
            Plot indices the crop now covers, root first.

        Raises:
            UnknownItemError: If the item does not exist.
            NotACropError: If the item is a product.
            ItemLockedError: If the crop is above the player's level.
            OutOfBoundsError: If the footprint leaves the grid.
            LandLockedError: If the footprint covers locked land.
            SpaceOccupiedError: If the footprint covers another crop.
            InsufficientFundsError: If the seeds are unaffordable.
        """
        now = self._now(now)
        with self._transaction("plant", now, quiet=quiet) as tx:
            draft = tx.state
            item = get_item(item_id)
            if not item.is_crop:
                raise NotACropError(f"{item.name} cannot be planted", details={"item": str(item.id)})
            if not is_unlocked(item.unlock_level, draft.level):
                raise ItemLockedError(
                    f"{item.name} unlocks at level {item.unlock_level}",
                    unlock_level=item.unlock_level,
                    current_level=draft.level,
                )

            error = grid.placement_error(index, item.width, item.height, draft.plots)
            if error is not None:
                raise error
            self._require_funds(draft, item.seed_cost, "Not enough money for seeds!")

            draft.money -= item.seed_cost
            cells = grid.place(index, item.id, draft.plots, now)

        logger.info("Crop planted", crop=item.id, index=index, cells=len(cells), cost=item.seed_cost)
        return cells

    def _harvest_root(self, tx: _Transaction, root_index: int) -> HarvestResult:
        draft = tx.state
        plot = draft.plots[root_index]
        item = ITEMS[plot.planted_crop]
        effect = draft.active_effect

        quantity = harvest_yield(plot.tier, effect, self._chance)
        xp_gained = adjusted_xp(item.xp_reward, effect)

        draft.inventory[item.id] = draft.count(item.id) + quantity
        draft.xp += xp_gained
        grid.clear(root_index, draft.plots)

        return HarvestResult(index=root_index, item_id=item.id, quantity=quantity, xp_gained=xp_gained)

    def _advance_event(self, tx: _Transaction, item_id: ItemId, amount: int) -> bool:
        """Count harvested units toward the active event; pay out on completion."""
        draft = tx.state
        active = draft.active_event
        if active is None or events.record_progress(active, item_id, amount) == 0:
            return False
        if not events.is_complete(active):
            return False

        definition = get_event(active.event_id)
        xp_gained = adjusted_xp(definition.reward_xp, draft.active_effect)
        draft.money += definition.reward_money
        draft.xp += xp_gained
        draft.active_event = None

        tx.notify(
            NotificationKind.EVENT_COMPLETE,
            f"Event Complete! {definition.title} +{definition.reward_money}G +{xp_gained}XP",
        )
        logger.info("Event completed", event_id=definition.id, reward_money=definition.reward_money)
        return True

    def harvest(self, index: int, *, now: float | None = None, quiet: bool = False) -> HarvestResult:
        """Harvest the crop covering ``index``.

        Occupied cells of a multi-tile crop redirect to its root.

        Raises:
            OutOfBoundsError: If the index is not on the grid.
            EmptyPlotError: If nothing is planted there.
            NotReadyError: If the crop is still growing.
        """
        now = self._now(now)
        with self._transaction("harvest", now, quiet=quiet) as tx:
            draft = tx.state
            if not 0 <= index < len(draft.plots):
                raise OutOfBoundsError("Plot index out of range", index=index)

            root_index = grid.resolve_root(index, draft.plots)
            plot = draft.plots[root_index]
            if plot.planted_crop is None:
                raise EmptyPlotError("Nothing to harvest here!", index=root_index)

            finish = ready_at(plot, draft.active_effect)
            if finish is None or now < finish:
                remaining = None if finish is None else finish - now
                raise NotReadyError("Not ready yet!", index=root_index, remaining_seconds=remaining)

            level_before = draft.level
            result = self._harvest_root(tx, root_index)
            item = ITEMS[result.item_id]
            tx.notify(
                NotificationKind.HARVEST,
                f"Harvested {item.name} x{result.quantity} (+{result.xp_gained} XP)",
            )
            completed = self._advance_event(tx, result.item_id, result.quantity)
            leveled_up = self._announce_level(tx, level_before)
            result = replace(result, event_completed=completed, leveled_up=leveled_up, level=draft.level)

        logger.info("Crop harvested", crop=result.item_id, index=root_index, quantity=result.quantity)
        return result

    def harvest_all(self, *, now: float | None = None) -> HarvestSummary:
        """Harvest every ready crop in one transition.

        Roots are visited in index order with the same per-crop rules as
        ``harvest``, so the totals match harvesting them one by one.
        """
        now = self._now(now)
        with self._transaction("harvest_all", now) as tx:
            draft = tx.state
            level_before = draft.level
            effect = draft.active_effect

            results: list[HarvestResult] = []
            for index, plot in enumerate(draft.plots):
                finish = ready_at(plot, effect)
                if finish is None or now < finish:
                    continue
                result = self._harvest_root(tx, index)
                completed = self._advance_event(tx, result.item_id, result.quantity)
                results.append(replace(result, event_completed=completed, level=draft.level))

            leveled_up = False
            if results:
                xp_total = sum(result.xp_gained for result in results)
                tx.notify(NotificationKind.HARVEST, f"Harvested {len(results)} crops (+{xp_total} XP)")
                leveled_up = self._announce_level(tx, level_before)
            summary = HarvestSummary(results=results, leveled_up=leveled_up, level=draft.level)

        logger.info("Harvest all", crops=summary.count, xp=summary.total_xp)
        return summary

    # -------------------------------------------------------------------------
    # Crafting and Trading
    # -------------------------------------------------------------------------

    def craft(self, recipe_id: str, *, now: float | None = None) -> CraftResult:
        """Consume a recipe's inputs and credit one unit of its output.

        Raises:
            UnknownRecipeError: If the recipe does not exist.
            ItemLockedError: If the recipe is above the player's level.
            MissingIngredientsError: If any input is short. Nothing is debited.
        """
        now = self._now(now)
        with self._transaction("craft", now) as tx:
            draft = tx.state
            recipe = get_recipe(recipe_id)
            if not is_unlocked(recipe.unlock_level, draft.level):
                raise ItemLockedError(
                    f"Recipe unlocks at level {recipe.unlock_level}",
                    unlock_level=recipe.unlock_level,
                    current_level=draft.level,
                )

            required = recipe.requirements()
            missing = self._shortfall(draft, required)
            if missing:
                raise MissingIngredientsError("Missing ingredients!", missing=missing)

            level_before = draft.level
            effect = draft.active_effect
            self._debit_items(draft, required)
            draft.inventory[recipe.output] = draft.count(recipe.output) + 1
            xp_gained = adjusted_xp(recipe.xp_reward, effect)
            draft.xp += xp_gained

            tx.notify(NotificationKind.CRAFT, f"Crafted {ITEMS[recipe.output].name}")
            leveled_up = self._announce_level(tx, level_before)
            result = CraftResult(
                recipe_id=recipe.id,
                item_id=recipe.output,
                xp_gained=xp_gained,
                craft_seconds=adjusted_craft_seconds(recipe, effect),
                leveled_up=leveled_up,
                level=draft.level,
            )

        logger.info("Item crafted", recipe_id=recipe.id, output=recipe.output)
        return result

    def sell(self, item_id: str, *, now: float | None = None) -> int | None:
        """Sell one unit of an item.

        Returns:
            Money received, or None if there was nothing to sell.

        Raises:
            UnknownItemError: If the item does not exist.
        """
        now = self._now(now)
        with self._transaction("sell", now) as tx:
            draft = tx.state
            item = get_item(item_id)
            if draft.count(item.id) <= 0:
                return None

            draft.inventory[item.id] = draft.count(item.id) - 1
            draft.money += item.sell_price
            tx.notify(NotificationKind.SALE, f"Sold {item.name} for {item.sell_price}G")

        logger.info("Item sold", item=item.id, price=item.sell_price)
        return item.sell_price

    def fulfill_order(self, order_id: str, *, now: float | None = None) -> OrderResult:
        """Deliver an order's items and collect its reward.

        Raises:
            UnknownOrderError: If no open order has this id.
            MissingItemsError: If any line is short. Nothing is debited.
        """
        now = self._now(now)
        with self._transaction("fulfill_order", now) as tx:
            draft = tx.state
            order = draft.get_order(order_id)
            if order is None:
                raise UnknownOrderError("Order not found", entity_id=order_id)

            required = order.requirements()
            missing = self._shortfall(draft, required)
            if missing:
                raise MissingItemsError("Missing items for order!", missing=missing)

            level_before = draft.level
            effect = draft.active_effect
            money_gained = adjusted_order_money(order.reward_money, effect)
            xp_gained = adjusted_xp(order.reward_xp, effect)

            self._debit_items(draft, required)
            draft.money += money_gained
            draft.xp += xp_gained
            draft.orders = [open_order for open_order in draft.orders if open_order.id != order.id]

            tx.notify(NotificationKind.ORDER_COMPLETE, f"Order Complete! +{money_gained}G +{xp_gained}XP")
            leveled_up = self._announce_level(tx, level_before)
            result = OrderResult(
                order_id=order.id,
                money_gained=money_gained,
                xp_gained=xp_gained,
                leveled_up=leveled_up,
                level=draft.level,
            )

        logger.info("Order fulfilled", order_id=order_id, money=money_gained, xp=xp_gained)
        return result

    # -------------------------------------------------------------------------
    # Land and Mascots
    # -------------------------------------------------------------------------

    def expand_land(self, *, now: float | None = None) -> int:
        """Buy the next land ring.

        Returns:
            The new expansion level.

        Raises:
            MaxExpansionReachedError: If every ring is already unlocked.
            InsufficientFundsError: If the next ring is unaffordable.
        """
        now = self._now(now)
        with self._transaction("expand_land", now) as tx:
            draft = tx.state
            if draft.expansion_level >= MAX_EXPANSION_LEVEL:
                raise MaxExpansionReachedError(
                    "Land is fully expanded!",
                    details={"expansion_level": draft.expansion_level},
                )

            cost = EXPANSION_COSTS[draft.expansion_level]
            self._require_funds(draft, cost, "Not enough money to expand!")

            draft.money -= cost
            draft.expansion_level += 1
            unlocked = grid.refresh_unlocks(draft.plots, draft.expansion_level)
            tx.notify(NotificationKind.EXPANSION, f"Land expanded! {unlocked} new plots unlocked")
            level = draft.expansion_level

        logger.info("Land expanded", expansion_level=level, cost=cost, plots_unlocked=unlocked)
        return level

    def buy_mascot(self, mascot_id: str, *, now: float | None = None) -> None:
        """Buy a mascot; it is equipped if no mascot is active.

        Raises:
            UnknownMascotError: If the mascot does not exist.
            MascotAlreadyOwnedError: If it was bought before.
            InsufficientFundsError: If it is unaffordable.
        """
        now = self._now(now)
        with self._transaction("buy_mascot", now) as tx:
            draft = tx.state
            mascot = get_mascot(mascot_id)
            if mascot.id in draft.owned_mascots:
                raise MascotAlreadyOwnedError(f"You already own {mascot.name}")
            self._require_funds(draft, mascot.price, f"Not enough money for {mascot.name}!")

            draft.money -= mascot.price
            draft.owned_mascots = [*draft.owned_mascots, mascot.id]
            if draft.active_mascot is None:
                draft.active_mascot = mascot.id
            tx.notify(NotificationKind.MASCOT, f"{mascot.name} joined your farm!")

        logger.info("Mascot bought", mascot=mascot.id, price=mascot.price)

    def equip_mascot(self, mascot_id: str, *, now: float | None = None) -> None:
        """Make an owned mascot the active one.

        Raises:
            UnknownMascotError: If the mascot does not exist.
            MascotNotOwnedError: If the player does not own it.
        """
        now = self._now(now)
        with self._transaction("equip_mascot", now) as tx:
            draft = tx.state
            mascot = get_mascot(mascot_id)
            if mascot.id not in draft.owned_mascots:
                raise MascotNotOwnedError(f"You don't own {mascot.name} yet")

            draft.active_mascot = mascot.id
            tx.notify(NotificationKind.MASCOT, f"{mascot.name} is now active")

        logger.info("Mascot equipped", mascot=mascot.id)

    def apply_texture(self, reference: str | None, *, now: float | None = None) -> None:
        """Store a cosmetic background texture reference."""
        now = self._now(now)
        with self._transaction("apply_texture", now) as tx:
            tx.state.forest_texture = reference

        logger.info("Forest texture applied", has_texture=reference is not None)

    # -------------------------------------------------------------------------
    # Time
    # -------------------------------------------------------------------------

    def tick(self, now: float | None = None) -> list[Notification]:
        """Advance all time-driven state by one scheduled step.

        In order: the day clock, weather, expired orders, an overdue event,
        then a chance to spawn one order and one event.

        Returns:
            Notifications produced by this tick.
        """
        now = self._now(now)
        sim = self._settings.simulation

        with self._transaction("tick", now) as tx:
            draft = tx.state
            draft.game_time = advance_clock(draft.game_time, sim.clock_increment)

            if now > draft.weather_end_time:
                roll = next_weather(self._chance)
                if roll.weather != draft.weather:
                    tx.notify(NotificationKind.WEATHER, f"The weather turned {roll.weather.value.lower()}")
                draft.weather = roll.weather
                draft.weather_end_time = now + roll.duration_seconds

            kept, expired = orders.prune_expired(draft.orders, now)
            if expired:
                draft.orders = kept
                for order in expired:
                    tx.notify(NotificationKind.ORDER_EXPIRED, f"{order.requester_name}'s order expired")

            active = draft.active_event
            if active is not None and events.is_expired(active, now):
                definition = get_event(active.event_id)
                draft.active_event = None
                tx.notify(NotificationKind.EVENT_FAILED, f"Event Failed: {definition.title}")
                logger.info("Event failed", event_id=definition.id, progress=active.progress)

            if len(draft.orders) < sim.max_open_orders and self._chance.roll(sim.order_spawn_chance):
                order = orders.generate_order(
                    draft.level,
                    draft.orders,
                    now,
                    self._chance,
                    emergency_chance=sim.emergency_chance,
                )
                draft.orders = [*draft.orders, order]
                prefix = "Emergency order" if order.is_emergency else "New order"
                tx.notify(NotificationKind.ORDER_NEW, f"{prefix} from {order.requester_name}!")
                logger.info("Order spawned", order_id=order.id, emergency=order.is_emergency)

            if draft.active_event is None and self._chance.roll(sim.event_spawn_chance):
                definition = events.pick_event(draft.level, self._chance)
                if definition is not None:
                    draft.active_event = events.start_event(definition, now)
                    tx.notify(NotificationKind.EVENT_START, f"Event Started: {definition.title}")
                    logger.info("Event started", event_id=definition.id)

        return list(tx.notifications)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save(self, now: float | None = None) -> dict[str, Any]:
        """Stamp the save time and export the state as a snapshot."""
        now = self._now(now)
        self._state.last_save_time = now
        snapshot = snapshot_io.export_snapshot(self._state)
        logger.info("Snapshot exported", money=self._state.money, level=self._state.level)
        return snapshot

    def load(self, snapshot: Any, *, now: float | None = None) -> OfflineReport:
        """Replace the state with a snapshot, reconciled up to ``now``.

        Raises:
            MalformedSaveError: If the snapshot is rejected. The current
                state is kept.
        """
        now = self._now(now)
        with self._transaction("load", now) as tx:
            loaded = snapshot_io.import_snapshot(snapshot)
            tx.state, report = reconcile(loaded, now, self._chance)
            for message in report.messages:
                tx.notify(NotificationKind.OFFLINE, message)

        logger.info("Snapshot loaded", level=tx.state.level, grown=report.ready_count)
        return report


__all__ = [
    "Notification",
    "NotificationCallback",
    "HarvestResult",
    "HarvestSummary",
    "CraftResult",
    "OrderResult",
    "new_game_state",
    "FarmEngine",
]
