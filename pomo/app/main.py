# pomo/app/main.py
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

# ---- ViewModels ----
from ..viewmodels.pomodoro_vm import PomodoroVM

# ---- UseCases & Adapters ----
from ..usecases.get_pomodoro import GetPomodoro
from ..usecases.save_pomodoro import SavePomodoro
from ..adapters.storage_local import PomodoroStorageLocal
from ..domain.models import Pomodoro
from ..domain.ports import PomodoroRepository
from ..utils import logging as logging_utils
from .config import AppConfig
from .container import Container

_log = logging.getLogger(__name__)


def build_container(
    config: AppConfig, repository: Optional[PomodoroRepository] = None
) -> Container:
    """Wire config -> repository -> use cases -> view model."""
    container = Container()
    container.register_instance(AppConfig, config)
    if repository is not None:
        container.register_instance(PomodoroRepository, repository)
    else:
        container.register_singleton(
            PomodoroRepository,
            lambda c: PomodoroStorageLocal(root_dir=c.resolve(AppConfig).data_dir),
        )
    container.register_factory(
        GetPomodoro,
        lambda c: GetPomodoro(
            repository=c.resolve(PomodoroRepository),
            default=c.resolve(AppConfig).default_pomodoro(),
        ),
    )
    container.register_factory(
        SavePomodoro, lambda c: SavePomodoro(repository=c.resolve(PomodoroRepository))
    )
    container.register_factory(
        PomodoroVM,
        lambda c: PomodoroVM(
            get_pomodoro=c.resolve(GetPomodoro),
            save_pomodoro=c.resolve(SavePomodoro),
        ),
    )
    return container


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pomo", description="Show or change the pomodoro setup.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log command state changes.")
    sub = parser.add_subparsers(dest="action", required=True)
    sub.add_parser("show", help="Print the stored pomodoro (or the defaults).")
    set_parser = sub.add_parser("set", help="Store a new pomodoro.")
    set_parser.add_argument("--focus", type=float, required=True, help="Focus minutes.")
    pause = set_parser.add_mutually_exclusive_group()
    pause.add_argument("--break", dest="break_min", type=float, help="Break minutes.")
    pause.add_argument("--no-break", action="store_true", help="Store without a break.")
    return parser.parse_args(argv)


def _print_pomodoro(vm: PomodoroVM) -> None:
    print(f"focus {vm.focus_label}")
    print(f"break {vm.break_label or '-'}")


async def run(args: argparse.Namespace, container: Container) -> int:
    vm: PomodoroVM = container.resolve(PomodoroVM)
    vm.add_listener(lambda: _log.debug("busy=%s error=%r", vm.busy, vm.error_message))
    try:
        if args.action == "show":
            await vm.load(None)
            command = vm.load
        else:
            config: AppConfig = container.resolve(AppConfig)
            break_min = None if args.no_break else (
                args.break_min if args.break_min is not None else config.default_break_min
            )
            try:
                pomodoro = Pomodoro.from_minutes(args.focus, break_min)
            except ValueError as exc:
                print(f"pomo: {exc}", file=sys.stderr)
                return 2
            await vm.save(pomodoro)
            command = vm.save

        if command.has_error:
            print(f"pomo: {vm.error_message}", file=sys.stderr)
            return 1
        _print_pomodoro(vm)
        return 0
    finally:
        vm.dispose()


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint."""
    args = _parse_args(argv)
    try:
        config = AppConfig.from_env()
    except ValueError as exc:
        print(f"pomo: {exc}", file=sys.stderr)
        return 2
    effective = logging_utils.configure_root(logging.DEBUG if args.verbose else config.log_level)
    _log.debug(
        "Log level %s%s",
        logging_utils.level_name(effective),
        " (forced by POMO_LOG_LEVEL/POMO_DEBUG)" if logging_utils.env_requests_debug() else "",
    )
    _log.debug("Using data dir %s", config.data_dir)
    return asyncio.run(run(args, build_container(config)))


if __name__ == "__main__":
    sys.exit(main())
