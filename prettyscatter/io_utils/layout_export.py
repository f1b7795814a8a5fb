from __future__ import annotations

import csv
import os
from typing import Any, Dict, List, Optional

from prettyscatter.core.models import DistributionResult, Rect
from prettyscatter.layout import LayoutPlan, Placement


def _rect_dict(rect: Rect) -> Dict[str, float]:
    return {
        "left": rect.left,
        "right": rect.right,
        "top": rect.top,
        "bottom": rect.bottom,
    }


def _placement_row(placement: Placement) -> Dict[str, Any]:
    """
    Constrói o dicionário correspondente a uma linha de saída de posição.

    Campos exportados:
        - element_id: identificador do elemento.
        - left, top: canto superior esquerdo do elemento no contêiner.
        - center_x, center_y: ponto da distribuição (centro do elemento).
    """
    return {
        "element_id": placement.element_id,
        "left": placement.left,
        "top": placement.top,
        "center_x": placement.center_x,
        "center_y": placement.center_y,
    }


def distribution_to_dict(result: DistributionResult) -> Dict[str, Any]:
    """
    Converte um `DistributionResult` em um dicionário serializável em JSON.
    """
    return {
        "success": result.success,
        "points": [[p.x, p.y] for p in result.points],
        "radius": result.radius,
        "iterations": result.iterations,
        "failure_reason": None if result.failure_reason is None else result.failure_reason.value,
        "attempts": [
            {"iteration": a.iteration, "radius": a.radius, "count": a.count}
            for a in result.attempts
        ],
    }


def plan_to_dict(plan: LayoutPlan, logs: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Converte um `LayoutPlan` no formato entregue à camada de adaptação:

        {
            "scattered": bool,
            "placements": [...],
            "container_height": float | None,
            "element_radius": float | None,
            "exclusion_zones": [...],
            "iterations": int,
            "failure_reason": str | None,
            "logs": [...]
        }
    """
    return {
        "scattered": plan.scattered,
        "placements": [_placement_row(p) for p in plan.placements],
        "container_height": plan.container_height,
        "element_radius": plan.element_radius,
        "exclusion_zones": [_rect_dict(z) for z in plan.exclusion_zones],
        "iterations": 0 if plan.distribution is None else plan.distribution.iterations,
        "failure_reason": None if plan.failure_reason is None else plan.failure_reason.value,
        "logs": list(logs or []),
    }


def export_placements_to_file(plan: LayoutPlan, out_path: str) -> None:
    """
    Exporta as posições de um plano para um arquivo CSV.

    O módulo apenas garante que o diretório pai exista e grava o conteúdo
    no caminho informado. Um plano sem espalhamento gera um arquivo só
    com o cabeçalho.

    Formato de saída:
        element_id,left,top,center_x,center_y
    """
    directory = os.path.dirname(out_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    fieldnames = ["element_id", "left", "top", "center_x", "center_y"]

    with open(out_path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for placement in plan.placements:
            writer.writerow(_placement_row(placement))


__all__ = ["distribution_to_dict", "plan_to_dict", "export_placements_to_file"]
