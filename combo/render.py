from __future__ import annotations

from typing import Optional

from .scenario import SDI, Scenario


def render_text(scenario: Scenario, share_link: Optional[str] = None) -> str:
    pos = scenario.positions

    lines = []
    lines.append("PRACTICE COMBO")
    lines.append(
        f"Starting move: {scenario.starting_move.value} | Percentage: {scenario.percentage}%"
    )
    lines.append(
        f"Tool: {scenario.tool.value} | Gold: {'yes' if scenario.gold else 'no'}"
    )
    if scenario.sdi == SDI.NONE:
        sdi = scenario.sdi.value
    else:
        sdi = f"{scenario.sdi.value} x{scenario.sdi_strength.value}"
    lines.append(f"DI: {scenario.di.value} | SDI: {sdi}")
    lines.append(
        f"Steve at {pos.steve_x:.1f}% | Lucina at {pos.lucina_x:.1f}% | "
        f"baseline {pos.bottom_offset:.0f}px"
    )
    if share_link:
        lines.append("")
        lines.append(f"Share: {share_link}")

    return "\n".join(lines)
