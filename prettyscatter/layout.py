from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from prettyscatter.config import ScatterConfig
from prettyscatter.core.models import (
    DistributionResult,
    ElementBox,
    FailureReason,
    Rect,
)
from prettyscatter.sampling.exclusion_zones import normalize_exclusion_zones
from prettyscatter.sampling.radius_search import find_distribution


@dataclass
class ScatterElement:
    """
    Elemento visual a ser espalhado no contêiner.

    Todos os elementos de uma cena são considerados do mesmo tamanho; o
    raio usado pela busca é calculado a partir do primeiro.
    """

    id: str
    width: float
    height: float


@dataclass
class ScatterScene:
    """
    Medições de uma passagem de layout, entregues pela camada de adaptação.

    Atributos:
        container:
            Caixa do contêiner (domínio de amostragem) no referencial
            ancestral comum.
        elements:
            Elementos a posicionar, na ordem em que devem receber os
            pontos.
        exclusion_zones:
            Caixas das zonas de exclusão, no mesmo referencial do
            contêiner.
        viewport_width:
            Largura atual da janela de visualização.
    """

    container: ElementBox
    elements: List[ScatterElement] = field(default_factory=list)
    exclusion_zones: List[ElementBox] = field(default_factory=list)
    viewport_width: float = math.inf


@dataclass
class Placement:
    """Posição final de um elemento, em coordenadas locais do contêiner."""

    element_id: str
    left: float
    top: float
    center_x: float
    center_y: float


@dataclass
class LayoutPlan:
    """
    Resultado de uma passagem de layout.

    Se `scattered` for falso, a camada de adaptação deve restaurar o
    layout original dos elementos; `placements` fica vazio e
    `failure_reason` indica o motivo.
    """

    scattered: bool
    placements: List[Placement] = field(default_factory=list)
    container_height: Optional[float] = None
    element_radius: Optional[float] = None
    exclusion_zones: List[Rect] = field(default_factory=list)
    distribution: Optional[DistributionResult] = None
    failure_reason: Optional[FailureReason] = None


def element_radius(width: float, height: float) -> float:
    """
    Calcula o raio de um elemento como a meia diagonal do quadrado que
    envolve o seu maior lado.
    """
    half_side = max(width, height) / 2.0
    return math.sqrt(2.0 * half_side ** 2)


def placement_offset(point_radius: float) -> float:
    """
    Distância entre o centro de um elemento e o seu canto superior
    esquerdo, em cada eixo.
    """
    return math.sqrt(point_radius ** 2 / 2.0)


def plan_layout(
    scene: ScatterScene,
    config: Optional[ScatterConfig] = None,
    rng: Optional[random.Random] = None,
) -> LayoutPlan:
    """
    Executa uma passagem completa de layout para uma cena.

    Fluxo da operação:
        1. Se a janela for estreita demais (`viewport_width` menor ou
           igual a `config.min_viewport_width`) ou não houver elementos,
           devolve um plano de recuo sem executar a busca.
        2. Calcula o raio do elemento a partir do primeiro elemento.
        3. Normaliza as zonas de exclusão para o referencial do contêiner.
        4. Executa `find_distribution` com a quantidade de elementos como
           alvo.
        5. Converte cada ponto aceito na posição do canto superior
           esquerdo do elemento correspondente.

    Args:
        scene:
            Medições da cena.
        config:
            Parâmetros da busca e da adaptação. Se `None`, usa
            `ScatterConfig()`.
        rng:
            Gerador de números aleatórios. Se `None`, é criado a partir
            de `config.random_seed`.

    Returns:
        `LayoutPlan` com as posições dos elementos ou com o motivo do
        recuo para o layout original.
    """
    if config is None:
        config = ScatterConfig()

    if scene.viewport_width <= config.min_viewport_width:
        return LayoutPlan(scattered=False, failure_reason=FailureReason.VIEWPORT_TOO_NARROW)

    if not scene.elements:
        return LayoutPlan(scattered=False, failure_reason=FailureReason.NO_ELEMENTS)

    first = scene.elements[0]
    radius = element_radius(first.width, first.height)
    container = scene.container

    zones = normalize_exclusion_zones(
        (box.to_rect() for box in scene.exclusion_zones),
        container.width,
        container.height,
        radius,
        origin_left=container.left,
        origin_top=container.top,
    )

    result = find_distribution(
        container.width,
        container.height,
        radius,
        len(scene.elements),
        zones,
        config=config,
        rng=rng,
    )

    if not result.success:
        return LayoutPlan(
            scattered=False,
            element_radius=radius,
            exclusion_zones=zones,
            distribution=result,
            failure_reason=result.failure_reason,
        )

    offset = placement_offset(radius)
    placements = [
        Placement(
            element_id=element.id,
            left=point.x - offset,
            top=point.y - offset,
            center_x=point.x,
            center_y=point.y,
        )
        for element, point in zip(scene.elements, result.points)
    ]

    return LayoutPlan(
        scattered=True,
        placements=placements,
        container_height=container.height,
        element_radius=radius,
        exclusion_zones=zones,
        distribution=result,
    )


__all__: Sequence[str] = [
    "ScatterElement",
    "ScatterScene",
    "Placement",
    "LayoutPlan",
    "element_radius",
    "placement_offset",
    "plan_layout",
]
