"""Command-line entrypoints for stoichio."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Dict, NoReturn

import typer

from stoichio.constants import CHARGE_SYMBOL
from stoichio.elements import Elements, default_elements
from stoichio.errors import FormulaError, StoichioError
from stoichio.formula import parse_charge, parse_formula
from stoichio.serialization import json_io, read_elements, read_substances, yaml_io
from stoichio.substances import Substance

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

ElementsOption = Annotated[
    Path | None,
    typer.Option(
        "--elements",
        envvar="STOICHIO_ELEMENTS",
        help="YAML or JSON element database to use instead of the periodic table.",
    ),
]


class OutputFormat(str, Enum):
    yaml = "yaml"
    json = "json"


def _abort(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _load_elements(path: Path | None) -> Elements:
    if path is None:
        return default_elements()
    try:
        return read_elements(path)
    except (OSError, ValueError) as exc:
        _abort(f"could not read element database {path}: {exc}")


def _write(text: str, output: Path | None) -> None:
    typer.echo(text)
    if output:
        with open(output, "w") as f:
            f.write(text)


def _substance_summary(substance: Substance) -> Dict[str, Any]:
    return {
        "name": substance.name,
        "formula": substance.formula.label,
        "type": substance.type,
        "tags": list(substance.tags),
        "elements": substance.formula.elements,
        "charge": substance.charge,
        "molar_mass": substance.molar_mass,
    }


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Parse chemical formulas and inspect elements and substances."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


@app.command()
def parse(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. CaCO3 or CO3--.")],
) -> None:
    """Print the element coefficients and charge of a formula."""
    try:
        composition = parse_formula(formula)
        charge = parse_charge(formula)
    except FormulaError:
        _abort(f"invalid chemical formula: {formula}")

    payload = {
        "formula": formula,
        "elements": {s: c for s, c in composition.items() if s != CHARGE_SYMBOL},
        "charge": charge,
    }
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def charge(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. Fe+3 or Fe(3+).")],
) -> None:
    """Print the electric charge of a formula."""
    try:
        value = parse_charge(formula)
    except FormulaError:
        _abort(f"invalid chemical formula: {formula}")
    typer.echo(value)


@app.command()
def molar_mass(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. H2O.")],
    elements: ElementsOption = None,
) -> None:
    """Print the molar mass of a formula."""
    database = _load_elements(elements)
    try:
        substance = Substance(formula, elements=database)
    except FormulaError:
        _abort(f"invalid chemical formula: {formula}")
    except StoichioError as exc:
        _abort(str(exc))

    payload = {
        "formula": formula,
        "molar_mass_kg_per_mol": substance.molar_mass,
        "molar_mass_g_per_mol": substance.molar_mass * 1000.0,
    }
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def substances(
    substances_file: Annotated[
        Path, typer.Argument(help="YAML or JSON file with a list of substances.")
    ],
    tag: Annotated[
        list[str] | None, typer.Option(help="Keep substances carrying this tag (repeatable).")
    ] = None,
    type: Annotated[str | None, typer.Option(help="Keep substances of this type.")] = None,
    elements: ElementsOption = None,
    output: Annotated[Path | None, typer.Option(help="Path to save output JSON.")] = None,
) -> None:
    """Summarize the substances in a file, optionally filtered."""
    database = _load_elements(elements)
    try:
        selected = read_substances(substances_file, database)
    except FormulaError as exc:
        _abort(f"invalid chemical formula: {exc.formula}")
    except (OSError, ValueError, StoichioError) as exc:
        _abort(f"could not read substances from {substances_file}: {exc}")

    if tag:
        selected = selected.with_tags(tag)
    if type:
        selected = selected.with_type(type)
    logger.debug("Selected %d substances", len(selected))

    data = [_substance_summary(substance) for substance in selected]
    _write(json.dumps(data, indent=2), output)


@app.command("elements")
def list_elements(
    tag: Annotated[str | None, typer.Option(help="Keep elements with this symbol, name or tag.")] = None,
    format: Annotated[OutputFormat, typer.Option(help="Output format.")] = OutputFormat.yaml,
    elements: ElementsOption = None,
    output: Annotated[Path | None, typer.Option(help="Path to save the output.")] = None,
) -> None:
    """Print the element database."""
    database = _load_elements(elements)
    if tag:
        database = database.filter(tag)

    codec = yaml_io if format == OutputFormat.yaml else json_io
    _write(codec.dump_elements(database), output)
