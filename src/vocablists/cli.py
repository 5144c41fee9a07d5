"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vocablists import __version__
from vocablists.config import load_config


def setup_logging(verbose: bool = False, quiet: bool = False, config_path: Path | None = None) -> None:
    """
    Configure the vocablists logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    config = load_config(config_path)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("vocablists")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vocablists",
        description="Manage vocabulary trainer settings, custom word lists and list selections.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Global flags, also accepted after the subcommand ("vocablists lists --store x.db")
    global_flags = argparse.ArgumentParser(add_help=False)
    global_flags.add_argument("--store", type=Path, help="SQLite store file (overrides store.path in config).")
    global_flags.add_argument("--config", type=Path, help="Extra config file applied over the global config.")
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_grp.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # init
    p_init = subparsers.add_parser("init", help="Create the store file.", parents=[global_flags])
    p_init.set_defaults(run="init")

    # settings
    p_settings = subparsers.add_parser("settings", help="Show or change practice settings.", parents=[global_flags])
    p_settings.add_argument("--show", action="store_true", help="Display all settings (default).")
    p_settings.add_argument("--get", dest="get_name", metavar="NAME", help="Print one setting.")
    p_settings.add_argument("--set", dest="set_pair", metavar="NAME=VALUE", help="Store a setting value.")
    p_settings.add_argument("--check", action="store_true", help="Report settings whose stored values are not recognized.")
    p_settings.set_defaults(run="settings")

    # lists
    p_lists = subparsers.add_parser("lists", help="List, show, create, rename or delete custom lists.", parents=[global_flags])
    p_lists.add_argument(
        "action",
        nargs="?",
        default="list",
        choices=("list", "show", "create", "rename", "delete"),
        help="What to do (default: list).",
    )
    p_lists.add_argument("names", nargs="*", help="List name(s): show/create/delete NAME, rename OLD NEW.")
    p_lists.add_argument("--valid", action="store_true", help="With list/show: only count or print valid words.")
    p_lists.set_defaults(run="lists")

    # words
    p_words = subparsers.add_parser("words", help="Add, edit or delete words in a custom list.", parents=[global_flags])
    p_words.add_argument("action", choices=("add", "edit", "delete"))
    p_words.add_argument("list_name", help="Custom list name.")
    p_words.add_argument("values", nargs="+", help="add: WORD...; edit: INDEX VALUE; delete: INDEX.")
    p_words.set_defaults(run="words")

    # select
    p_select = subparsers.add_parser("select", help="Select or deselect lists for practice.", parents=[global_flags])
    p_select.add_argument("names", nargs="*", help="List names to (de)select.")
    cat_grp = p_select.add_mutually_exclusive_group()
    cat_grp.add_argument("--builtin", action="store_true", help="Names refer to built-in lists.")
    cat_grp.add_argument("--custom", action="store_true", help="Names refer to custom lists (default).")
    p_select.add_argument("--off", action="store_true", help="Deselect instead of select.")
    p_select.add_argument("--show", action="store_true", help="Print current selections (default when no names).")
    p_select.set_defaults(run="select")

    # export
    p_export = subparsers.add_parser("export", help="Export a custom list as JSON.", parents=[global_flags])
    p_export.add_argument("list_name", help="Custom list name.")
    p_export.add_argument("--output", "-o", type=Path, help="Write to file instead of stdout.")
    p_export.set_defaults(run="export")

    # import
    p_import = subparsers.add_parser("import", help="Import a custom list from exported JSON.", parents=[global_flags])
    p_import.add_argument("file", help="JSON file to read, or - for stdin.")
    p_import.set_defaults(run="import")

    # config
    p_config = subparsers.add_parser("config", help="Show or edit configuration.", parents=[global_flags])
    p_config.add_argument("--show", action="store_true", help="Display current configuration.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value (dotted key).")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        config_path=getattr(args, "config", None),
    )
    run = getattr(args, "run", None)
    if not run:
        parser.print_help()
        sys.exit(0)

    if run == "init":
        from vocablists.commands.init_cmd import run as cmd_run
    elif run == "settings":
        from vocablists.commands.settings_cmd import run as cmd_run
    elif run == "lists":
        from vocablists.commands.lists_cmd import run as cmd_run
    elif run == "words":
        from vocablists.commands.words_cmd import run as cmd_run
    elif run == "select":
        from vocablists.commands.select_cmd import run as cmd_run
    elif run == "export":
        from vocablists.commands.export import run as cmd_run
    elif run == "import":
        from vocablists.commands.import_cmd import run as cmd_run
    elif run == "config":
        from vocablists.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
