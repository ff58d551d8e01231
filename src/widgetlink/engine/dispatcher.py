"""
Trigger Dispatcher
Routes a fired trigger through the rule table to registered handlers.
"""

import asyncio
import inspect
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional, Set

from widgetlink.bindings import Action, Rule
from widgetlink.core import get_logger, LogContext, new_dispatch_id
from widgetlink.monitoring import metrics_collector
from widgetlink.registry import HandlerRegistry
from .resolver import ExpressionResolver

logger = get_logger(__name__)


class TriggerDispatcher:
    """
    Dispatches triggers to handlers.

    Matching rules run in compiled order and their actions in declared order,
    synchronously with the dispatch call. A handler that fails or is missing
    never stops the remaining actions. Awaitables returned by handlers are
    scheduled as background tasks on the running loop and never awaited here.
    """

    def __init__(
        self,
        resolver: ExpressionResolver,
        registry: HandlerRegistry,
        serialize_per_target: bool = False,
    ):
        self.resolver = resolver
        self.registry = registry
        self.serialize_per_target = serialize_per_target
        self._tasks: Set[asyncio.Future] = set()
        self._in_flight: Dict[str, asyncio.Future] = {}

    def dispatch(
        self,
        trigger: str,
        rules: Iterable[Rule],
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Fire a trigger.

        Args:
            trigger: Trigger name, "<widget-id>.<event>"
            rules: Compiled rule table
            context: Immediate values keyed by widget id, overriding the store
        """
        matched = [rule for rule in rules if rule.trigger == trigger]
        dispatch_id = new_dispatch_id()

        with LogContext(dispatch_id=dispatch_id, trigger=trigger):
            with metrics_collector.measure_duration(
                lambda d: metrics_collector.record_dispatch(len(matched), d)
            ):
                if not matched:
                    logger.debug("no_matching_rules")
                    return

                logger.debug("dispatch_started", rules=len(matched))
                for rule in matched:
                    for action in rule.actions:
                        self._run_action(action, context, dispatch_id)

    def _run_action(
        self,
        action: Action,
        context: Optional[Mapping[str, Any]],
        dispatch_id: str,
    ) -> None:
        try:
            args = self.resolver.resolve_args(action.args, context)
        except Exception as e:
            metrics_collector.record_action("resolution_error")
            logger.error(
                "resolution_failed",
                target=action.target,
                action_type=action.type,
                error=str(e),
                exc_info=True,
            )
            return

        entry = self.registry.lookup(action.target, action.type)
        if entry is None:
            metrics_collector.record_action("missing_handler")
            logger.warning("handler_missing", target=action.target, action_type=action.type)
            return

        try:
            result = entry.callback(args)
        except Exception as e:
            metrics_collector.record_action("handler_error")
            logger.error(
                "handler_failed",
                target=action.target,
                action_type=action.type,
                error=str(e),
                exc_info=True,
            )
            return

        if inspect.isawaitable(result):
            self._schedule(result, action, dispatch_id)
        else:
            metrics_collector.record_action("ok")

    def _schedule(self, awaitable: Any, action: Action, dispatch_id: str) -> None:
        """Run an awaitable handler result in the background."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            metrics_collector.record_action("no_loop")
            logger.warning(
                "async_handler_without_loop",
                target=action.target,
                action_type=action.type,
            )
            return

        if inspect.iscoroutine(awaitable):
            task = loop.create_task(awaitable)
        else:
            task = asyncio.ensure_future(awaitable)

        if self.serialize_per_target:
            previous = self._in_flight.get(action.target)
            if previous is not None and not previous.done():
                previous.cancel()
                metrics_collector.record_action("superseded")
                logger.debug("async_handler_superseded", target=action.target)
            self._in_flight[action.target] = task

        self._tasks.add(task)
        task.add_done_callback(
            lambda t: self._on_task_done(t, action, dispatch_id)
        )
        metrics_collector.record_action("scheduled")

    def _on_task_done(self, task: asyncio.Future, action: Action, dispatch_id: str) -> None:
        self._tasks.discard(task)
        if self._in_flight.get(action.target) is task:
            del self._in_flight[action.target]

        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            metrics_collector.record_action("async_error")
            logger.error(
                "async_handler_failed",
                dispatch_id=dispatch_id,
                target=action.target,
                action_type=action.type,
                error=str(error),
                exc_info=error,
            )

    def pending_tasks(self) -> List[asyncio.Future]:
        """Background handler tasks that have not finished yet."""
        return [t for t in self._tasks if not t.done()]

    async def wait_pending(self) -> None:
        """Wait until all background handler tasks finish, including ones they start."""
        while True:
            pending = self.pending_tasks()
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)
