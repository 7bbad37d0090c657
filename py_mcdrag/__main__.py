import argparse
import logging
import sys

from typing_extensions import Callable, List, Optional, TextIO

from py_mcdrag import __version__
from py_mcdrag.boundary_layer import BoundaryLayer
from py_mcdrag.drag_result import DragResult, calculate
from py_mcdrag.exceptions import (InvalidBoundaryLayerCode, InvalidGeometry, MissingInput,
                                  ParseError)
from py_mcdrag.interface import McDragCalculator
from py_mcdrag.logger import logger
from py_mcdrag.profile_loader import load_multiple_toml, load_profile
from py_mcdrag.projectile import ProjectileGeometry
from py_mcdrag.report import format_report
from py_mcdrag.settings import Settings

InputFn = Callable[[], str]

CLEAR_SCREEN = "\x1B[2J\x1B[1;1H"

# (field, prompt) in the order the legacy program asks for them
NUMERIC_PROMPTS = (
    ('ref_diameter', "ENTER PROJECTILE REFERENCE DIAMETER (MM): "),
    ('total_length', "ENTER TOTAL PROJECTILE LENGTH (CALIBERS): "),
    ('nose_length', "ENTER NOSE LENGTH (CALIBERS): "),
    ('rt_r', "ENTER RT/R (HEADSHAPE PARAMETER): "),
    ('boattail_length', "ENTER BOATTAIL LENGTH (CALIBERS): "),
    ('base_diameter', "ENTER BASE DIAMETER (CALIBERS): "),
    ('meplat_diameter', "ENTER MEPLAT DIAMETER (CALIBERS): "),
    ('band_diameter', "ENTER ROTATING BAND DIAMETER (CALIBERS): "),
)
CG_NOTE = "[NOTE: CENTER OF GRAVITY LOCATION IS OPTIONAL; IF UNKNOWN, ENTER 0]"
CG_PROMPT = "ENTER CENTER OF GRAVITY LOCATION (CALIBERS FROM NOSE): "
BL_PROMPT = "ENTER THE BOUNDARY LAYER CODE (L/L, L/T, OR T/T): "
BL_RETRY = "INCORRECT BOUNDARY LAYER CODE. PLEASE TRY AGAIN."
NUMBER_RETRY = "INVALID NUMBER. PLEASE TRY AGAIN."
ID_PROMPT = "ENTER PROJECTILE IDENTIFICATION: "
COPY_PROMPT = "COPY THIS? (ENTER Y FOR YES, N FOR NO): "
AGAIN_PROMPT = "RUN ANOTHER CASE? ENTER Y FOR YES, N FOR NO: "


def parse_float(text: str) -> float:
    """Read a number typed at a prompt.

    Raises:
        ParseError: If the text is not a number
    """
    try:
        return float(text.strip())
    except ValueError as exc:
        raise ParseError(f"Invalid number {text.strip()!r}") from exc


def _ask(prompt: str, input_fn: InputFn, out: TextIO) -> str:
    out.write(prompt)
    out.flush()
    return input_fn().strip()


def prompt_float(prompt: str, input_fn: InputFn, out: TextIO) -> float:
    while True:
        try:
            value = parse_float(_ask(prompt, input_fn, out))
        except ParseError as exc:
            logger.debug(exc)
            print(NUMBER_RETRY, file=out)
            continue
        print(file=out)
        return value


def prompt_boundary_layer(input_fn: InputFn, out: TextIO) -> BoundaryLayer:
    for bl in BoundaryLayer:
        print(f"FOR {bl.description}, CODE = {bl.code}", file=out)
    print(file=out)
    while True:
        try:
            boundary_layer = BoundaryLayer.parse(_ask(BL_PROMPT, input_fn, out))
        except InvalidBoundaryLayerCode:
            print(BL_RETRY, file=out)
            continue
        print(file=out)
        return boundary_layer


def prompt_geometry(input_fn: InputFn, out: TextIO) -> ProjectileGeometry:
    """Collect one projectile, one quantity at a time.

    Raises:
        InvalidGeometry: If the entered values violate a model precondition
    """
    print("ENTER THE MCDRAG INPUTS, ONE QUANTITY AT A TIME.", file=out)
    print(file=out)
    values = {name: prompt_float(prompt, input_fn, out) for name, prompt in NUMERIC_PROMPTS}
    print(CG_NOTE, file=out)
    print(file=out)
    values['cg_location'] = prompt_float(CG_PROMPT, input_fn, out)
    values['boundary_layer'] = prompt_boundary_layer(input_fn, out)
    values['identification'] = _ask(ID_PROMPT, input_fn, out)
    return ProjectileGeometry(**values)


def copy_report(result: DragResult, filename: str) -> None:
    """Append the report to a text file, the stand-in for the hardcopy printer."""
    with open(filename, "a", encoding="utf-8") as fp:
        fp.write(format_report(result))
        fp.write("\n")
    logger.info(f"Report copied to {filename}")


def _yes(answer: str) -> bool:
    return answer.strip().upper() == "Y"


def run_interactive(input_fn: InputFn = input, out: TextIO = sys.stdout,
                    copy_file: Optional[str] = None) -> None:
    """Run interactive cases until the user declines another one."""
    clear = out.isatty()
    while True:
        if clear:
            out.write(CLEAR_SCREEN)
        try:
            result = calculate(prompt_geometry(input_fn, out))
        except InvalidGeometry as exc:
            logger.error(exc)
            print(file=out)
            if not _yes(_ask(AGAIN_PROMPT, input_fn, out)):
                return
            continue

        if clear:
            out.write(CLEAR_SCREEN)
        out.write(format_report(result))
        print(file=out)
        print(file=out)

        if _yes(_ask(COPY_PROMPT, input_fn, out)):
            copy_report(result, copy_file or Settings.copy_file)
        print(file=out)
        if not _yes(_ask(AGAIN_PROMPT, input_fn, out)):
            return


def run_json(source: str, out: TextIO, indent: Optional[int] = 2) -> None:
    if source == '-':
        payload = sys.stdin.read()
    else:
        with open(source, "r", encoding="utf-8") as fp:
            payload = fp.read()
    print(McDragCalculator(indent=indent).handle_request(payload), file=out)


def export_result(result: DragResult, csv_file: Optional[str], plot_file: Optional[str]) -> None:
    if csv_file:
        result.dataframe().to_csv(csv_file, index=False)
        logger.info(f"Drag table written to {csv_file}")
    if plot_file:
        result.plot().figure.savefig(plot_file)
        logger.info(f"Drag plot written to {plot_file}")


def get_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pymcdrag',
        description="Zero-yaw drag coefficients of axisymmetric projectiles (McCoy MCDRAG)"
    )
    parser.add_argument('files', help="Projectile .toml profiles to evaluate", nargs='*', type=str)
    parser.add_argument("-v", "--version", action='version',
                        version=f'pymcdrag v{__version__}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")

    modes = parser.add_argument_group('Modes')
    modes.add_argument("-i", "--interactive", action="store_true",
                       help="Enter projectile interactively (default without files)")
    modes.add_argument("-m", "--merge", action="store_true",
                       help="Merge all profile files into one projectile")
    modes.add_argument("-j", "--json", metavar="FILE", action="store",
                       help="Evaluate a JSON request file ('-' for stdin), print JSON response")
    modes.add_argument("--validate-code", metavar="CODE", action="store",
                       help="Check a boundary layer code and exit")

    output = parser.add_argument_group('Output')
    output.add_argument("--copy-file", action="store", default=None,
                        help="File that COPY THIS? appends reports to")
    output.add_argument("--csv", action="store", default=None, help="Write drag table as CSV (requires pandas)")
    output.add_argument("--plot", action="store", default=None, help="Save drag plot (requires matplotlib)")
    return parser


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    parser = get_arg_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logger.setLevel(logging.DEBUG)
        logger.info("Debug messages enabled")

    try:
        if args.validate_code is not None:
            valid = McDragCalculator.validate_boundary_layer(args.validate_code)
            print("VALID" if valid else "INVALID", file=out)
            return 0 if valid else 1

        if args.json:
            run_json(args.json, out)
            return 0

        if args.files and not args.interactive:
            if args.merge:
                geometries = [load_multiple_toml(*args.files)]
            else:
                geometries = [load_profile(path) for path in args.files]
            for geometry in geometries:
                result = calculate(geometry)
                out.write(format_report(result))
                print(file=out)
                export_result(result, args.csv, args.plot)
            return 0

        run_interactive(out=out, copy_file=args.copy_file)
        return 0
    except (ParseError, InvalidBoundaryLayerCode, InvalidGeometry, MissingInput) as exc:
        logger.error(exc)
    except (EOFError, KeyboardInterrupt):
        print(file=out)
        return 0
    except OSError as exc:
        logger.exception(exc)
    return 1


if __name__ == '__main__':
    sys.exit(main())
