"""director-engine CLI entry point."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger("director_engine")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="director-engine",
        description="Director Engine: screenplay to directed production",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log planning decisions to stderr",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    validate_parser = sub.add_parser(
        "validate-screenplay", help="Validate a Screenplay JSON file",
    )
    validate_parser.add_argument(
        "--screenplay", required=True, metavar="screenplay.json",
        help="Path to a Screenplay JSON file",
    )

    direct_parser = sub.add_parser(
        "direct", help="Plan a Screenplay JSON into a validated DirectorProject JSON",
    )
    direct_parser.add_argument(
        "--screenplay", required=True, metavar="screenplay.json",
        help="Path to a Screenplay JSON file",
    )
    direct_parser.add_argument(
        "--backstories", metavar="backstories.json",
        help="Optional CharacterBackstory list used to rig dialogue",
    )
    direct_parser.add_argument(
        "--config", metavar="config.json",
        help="Optional DirectionConfig overrides",
    )
    direct_parser.add_argument(
        "--output", required=True, metavar="project.json",
        help="Destination path for the DirectorProject JSON",
    )

    rig_parser = sub.add_parser(
        "rig-dialogue", help="Print the rigging of one dialogue line as JSON",
    )
    rig_parser.add_argument("--screenplay", required=True, metavar="screenplay.json")
    rig_parser.add_argument("--backstories", required=True, metavar="backstories.json")
    rig_parser.add_argument("--scene", required=True, type=int, help="Scene number")
    rig_parser.add_argument(
        "--line", required=True, type=int,
        help="1-based index of the dialogue block within the scene",
    )
    rig_parser.add_argument("--config", metavar="config.json")

    timeline_parser = sub.add_parser(
        "timeline", help="Print the project-wide shot timeline of a DirectorProject",
    )
    timeline_parser.add_argument("--project", required=True, metavar="project.json")

    validate_project_parser = sub.add_parser(
        "validate-project",
        help="Validate a DirectorProject JSON file against the canonical contract",
    )
    validate_project_parser.add_argument("--project", required=True, metavar="project.json")

    args = parser.parse_args()
    _configure_logging(args.verbose)

    if args.command == "validate-screenplay":
        import jsonschema
        from pydantic import ValidationError
        try:
            validate_screenplay_file(Path(args.screenplay))
        except (jsonschema.ValidationError, ValidationError, ValueError, OSError):
            print("ERROR: invalid Screenplay")
            sys.exit(1)
        print("OK: Screenplay is valid")
        sys.exit(0)
    elif args.command == "direct":
        _run_or_exit(
            produce_project,
            Path(args.screenplay),
            Path(args.output),
            backstories_path=_optional_path(args.backstories),
            config_path=_optional_path(args.config),
        )
        print(f"OK: wrote {args.output}")
        sys.exit(0)
    elif args.command == "rig-dialogue":
        rigging_json = _run_or_exit(
            produce_rigging,
            Path(args.screenplay),
            Path(args.backstories),
            args.scene,
            args.line,
            config_path=_optional_path(args.config),
        )
        print(rigging_json)
        sys.exit(0)
    elif args.command == "timeline":
        print(_run_or_exit(produce_timeline, Path(args.project)))
        sys.exit(0)
    elif args.command == "validate-project":
        import jsonschema
        try:
            validate_project_file(Path(args.project))
        except jsonschema.ValidationError as exc:
            print(f"ERROR: invalid DirectorProject: {exc.message}")
            sys.exit(1)
        except Exception as exc:
            print(f"ERROR: {exc}")
            sys.exit(1)
        print("OK: DirectorProject is valid")
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


def _run_or_exit(func, *args, **kwargs):
    """Call *func*; print a one-line ERROR and exit 1 on any failure."""
    import jsonschema
    from pydantic import ValidationError

    try:
        return func(*args, **kwargs)
    except jsonschema.ValidationError as exc:
        print(f"ERROR: contract violation: {exc.message}")
    except ValidationError as exc:
        print(f"ERROR: invalid input: {exc.errors()[0]['msg']}")
    except ValueError as exc:
        message = str(exc)
        print(message if message.startswith("ERROR:") else f"ERROR: {message}")
    except OSError as exc:
        print(f"ERROR: {exc}")
    sys.exit(1)


def validate_screenplay_file(screenplay_path: Path) -> None:
    """Check a Screenplay JSON file against the contract and the model.

    Raises ``jsonschema.ValidationError`` on contract violations and
    ``pydantic.ValidationError`` on model violations.
    """
    from director_engine.contract_validate import validate_screenplay_contract
    from director_engine.schemas.screenplay_v1 import load_screenplay

    data = json.loads(screenplay_path.read_text(encoding="utf-8"))
    validate_screenplay_contract(data)
    load_screenplay(data)


def validate_project_file(project_path: Path) -> None:
    """Load a DirectorProject JSON file and validate it against the canonical contract.

    Raises ``jsonschema.ValidationError`` if the file does not conform to
    ``contracts/DirectorProject.v1.json``.
    """
    from director_engine.contract_validate import validate_project_contract

    data = json.loads(project_path.read_text(encoding="utf-8"))
    validate_project_contract(data)


def _load_inputs(screenplay_path: Path, backstories_path: Optional[Path], config_path: Optional[Path]):
    from director_engine.config import DEFAULT_CONFIG, load_config
    from director_engine.contract_validate import validate_screenplay_contract
    from director_engine.schemas.backstory_v1 import load_backstories
    from director_engine.schemas.screenplay_v1 import load_screenplay

    raw = json.loads(screenplay_path.read_text(encoding="utf-8"))
    # Contract check before the model, so parser output is judged on its own terms.
    validate_screenplay_contract(raw)
    screenplay = load_screenplay(raw)
    store = load_backstories(backstories_path) if backstories_path else load_backstories([])
    config = load_config(config_path) if config_path else DEFAULT_CONFIG
    return screenplay, store, config


def produce_project(
    screenplay_path: Path,
    output_path: Path,
    *,
    backstories_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> None:
    """Plan a screenplay file, validate the project against the contract, write it.

    The output file is never written when validation fails.
    """
    from director_engine.contract_validate import validate_project_model
    from director_engine.direction.project import direct_project
    from director_engine.schemas.director_project_v1 import dump_project

    screenplay, store, config = _load_inputs(screenplay_path, backstories_path, config_path)
    project = direct_project(screenplay, lookup_backstory=store.lookup, config=config)

    validate_project_model(project)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_project(project), encoding="utf-8")


def produce_rigging(
    screenplay_path: Path,
    backstories_path: Path,
    scene_number: int,
    line: int,
    *,
    config_path: Optional[Path] = None,
) -> str:
    """Rig one dialogue line without planning shots; return canonical JSON."""
    from director_engine.errors import InvalidInput
    from director_engine.voiceover.engine import rig_dialogue

    screenplay, store, config = _load_inputs(screenplay_path, backstories_path, config_path)
    scene = next((s for s in screenplay.scenes if s.scene_number == scene_number), None)
    if scene is None:
        raise InvalidInput(f"scene {scene_number} not found")
    if not 1 <= line <= len(scene.dialogue):
        raise InvalidInput(f"scene {scene_number} has no dialogue line {line}")
    dialogue = scene.dialogue[line - 1]
    backstory = store.lookup(dialogue.character, screenplay)
    if backstory is None:
        raise InvalidInput(f"no backstory for {dialogue.character!r}")

    rigging = rig_dialogue(dialogue, backstory, scene, config=config)
    raw = json.loads(rigging.model_dump_json())
    return json.dumps(raw, sort_keys=True, indent=2, ensure_ascii=False)


def produce_timeline(project_path: Path) -> str:
    from director_engine.direction.timeline import compose_timeline
    from director_engine.schemas.director_project_v1 import load_project

    timeline = compose_timeline(load_project(project_path))
    raw = json.loads(timeline.model_dump_json())
    return json.dumps(raw, sort_keys=True, indent=2, ensure_ascii=False)


if __name__ == "__main__":
    main()
