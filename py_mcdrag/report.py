"""Fixed-column text report of a DragResult, in the legacy MCDRAG layout."""
from typing_extensions import List

from py_mcdrag.drag_result import DragResult
from py_mcdrag.projectile import ProjectileGeometry

__all__ = ('TITLE', 'format_report', 'format_input_row', 'report_lines')

TITLE = "MCDRAG, DECEMBER 1974, R. L. MCCOY"

INPUT_HEADER = (
    "  REF.    TOTAL     NOSE    RT/R  BOATTAIL   BASE   MEPLAT   BAND     XCG   BOUND.",
    "  DIA.   LENGTH   LENGTH          LENGTH    DIA.    DIA.    DIA.    NOSE   LAYER",
    "  (MM)    (CAL)    (CAL)           (CAL)    (CAL)   (CAL)   (CAL)   (CAL)   CODE",
)

TABLE_HEADER = "   M      CD0      CDH     CDSF    CDBND     CDBT     CDB    PB/PINF"


def format_input_row(geometry: ProjectileGeometry) -> str:
    g = geometry
    return (f"{g.ref_diameter:7.2f} {g.total_length:7.2f} {g.nose_length:7.3f} {g.rt_r:6.3f} "
            f"{g.boattail_length:7.3f} {g.base_diameter:6.3f} {g.meplat_diameter:6.3f} "
            f"{g.band_diameter:6.3f} {g.cg_location:6.2f}   {g.boundary_layer.code}")


def report_lines(result: DragResult) -> List[str]:
    """Report of a result as a list of lines (without line terminators)."""
    lines = [
        TITLE,
        "",
        f"PROJECTILE IDENTIFICATION: {result.geometry.identification}",
        "",
        *INPUT_HEADER,
        "",
        format_input_row(result.geometry),
        "",
        "",
        TABLE_HEADER,
        "",
    ]
    lines.extend(" ".join(point.formatted()) for point in result)
    lines.extend(("", ""))
    lines.extend(result.messages)
    return lines


def format_report(result: DragResult) -> str:
    return "\n".join(report_lines(result)) + "\n"
