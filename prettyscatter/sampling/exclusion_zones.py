from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from prettyscatter.core.models import Rect


def to_domain_local(rect: Rect, origin_left: float, origin_top: float) -> Rect:
    """
    Converte um retângulo do referencial ancestral para o referencial
    local do domínio, subtraindo a origem do domínio no mesmo ancestral.
    """
    return Rect(
        left=rect.left - origin_left,
        right=rect.right - origin_left,
        top=rect.top - origin_top,
        bottom=rect.bottom - origin_top,
    )


def _snap(edge: float, boundary: float, point_radius: float) -> float:
    if abs(edge - boundary) < point_radius:
        return boundary
    return edge


def snap_to_domain_edges(
    rect: Rect,
    width: float,
    height: float,
    point_radius: float,
) -> Rect:
    """
    Estende as bordas de uma zona de exclusão até as bordas do domínio
    quando a faixa entre elas é estreita demais para um elemento.

    Cada borda da zona é comparada à borda correspondente do domínio:
    `top` e `left` com 0, `bottom` com `height` e `right` com `width`.
    Se a distância for menor que `point_radius`, a borda da zona passa a
    coincidir exatamente com a do domínio. Uma faixa assim nunca comporta
    um ponto, e deixá-la aberta só faria o amostrador desperdiçar
    candidatos (ou permitir um elemento parcialmente fora do domínio).

    Um ajuste que inverteria o retângulo (zona totalmente fora do
    domínio) é ignorado naquele eixo.

    Args:
        rect:
            Zona de exclusão no referencial local do domínio.
        width:
            Largura do domínio.
        height:
            Altura do domínio.
        point_radius:
            Raio do elemento posicionado.

    Returns:
        Novo `Rect` com as bordas ajustadas. A operação é idempotente.
    """
    left = _snap(rect.left, 0.0, point_radius)
    right = _snap(rect.right, width, point_radius)
    top = _snap(rect.top, 0.0, point_radius)
    bottom = _snap(rect.bottom, height, point_radius)

    if left > right:
        left, right = rect.left, rect.right
    if top > bottom:
        top, bottom = rect.top, rect.bottom

    return Rect(left=left, right=right, top=top, bottom=bottom)


def normalize_exclusion_zones(
    raw_rects: Iterable[Rect],
    width: float,
    height: float,
    point_radius: float,
    origin_left: float = 0.0,
    origin_top: float = 0.0,
) -> List[Rect]:
    """
    Calcula as zonas de exclusão efetivas de uma passagem de layout.

    Para cada retângulo bruto (medido em relação ao ancestral comum), a
    função o traduz para o referencial local do domínio e em seguida
    aplica `snap_to_domain_edges`. O resultado depende apenas das
    dimensões do domínio e do raio do elemento, não do raio de teste da
    busca, e por isso é calculado uma única vez antes das tentativas de
    amostragem.

    Args:
        raw_rects:
            Zonas de exclusão no referencial ancestral.
        width:
            Largura do domínio.
        height:
            Altura do domínio.
        point_radius:
            Raio do elemento posicionado.
        origin_left:
            Posição X do domínio no referencial ancestral.
        origin_top:
            Posição Y do domínio no referencial ancestral.

    Returns:
        Lista de `Rect` no referencial local, na mesma ordem da entrada.
    """
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError("As dimensões do domínio devem ser números finitos.")
    if width <= 0.0 or height <= 0.0:
        raise ValueError("As dimensões do domínio devem ser maiores que zero.")
    if not math.isfinite(point_radius) or point_radius < 0.0:
        raise ValueError("point_radius deve ser um número finito e não negativo.")

    zones: List[Rect] = []
    for rect in raw_rects:
        local = to_domain_local(rect, origin_left, origin_top)
        zones.append(snap_to_domain_edges(local, width, height, point_radius))
    return zones


__all__: Sequence[str] = [
    "to_domain_local",
    "snap_to_domain_edges",
    "normalize_exclusion_zones",
]
