from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence

from prettyscatter.core.models import Point, Rect, Sample
from prettyscatter.core.random_utils import ring_candidates, sample_point_in_inset_rect
from prettyscatter.core.spatial_grid import SpatialGrid


def count_zone_collisions(x: float, y: float, zones: Sequence[Rect]) -> int:
    """Conta quantas zonas de exclusão contêm o ponto (x, y)."""
    return sum(1 for zone in zones if zone.contains(x, y))


def _in_inset_domain(
    x: float,
    y: float,
    width: float,
    height: float,
    inset: float,
) -> bool:
    return inset <= x < width - inset and inset <= y < height - inset


def poisson_disc_sample(
    width: float,
    height: float,
    radius: float,
    point_radius: float,
    exclusion_zones: Sequence[Rect] = (),
    rng: Optional[random.Random] = None,
    k: int = 8,
    seed_attempts: int = 20,
    epsilon: float = 1e-7,
) -> List[Point]:
    """
    Gera um conjunto maximal de pontos por amostragem de Poisson em disco
    (método de Bridson), respeitando zonas de exclusão.

    Garantias sobre o resultado:
        - nenhum par de pontos está a menos de `radius` de distância;
        - nenhum ponto está dentro de uma zona de exclusão;
        - nenhum ponto está a menos de `point_radius` de uma borda do
          domínio.

    Algoritmo:
        1. Cria uma `SpatialGrid` com células de lado `radius / sqrt(2)`.
        2. Fase semente: faz até `seed_attempts` sorteios dentro do
           domínio recuado por `point_radius` e aceita o primeiro que não
           colide com nenhuma zona. Sem semente válida, retorna lista vazia.
        3. Fase de crescimento: enquanto houver amostras ativas, escolhe
           uma delas ao acaso e testa `k` candidatos igualmente espaçados
           a `radius + epsilon` de distância. O primeiro candidato dentro
           do domínio recuado, longe de todas as amostras aceitas e fora
           das zonas é aceito. Se nenhum for aceito, a amostra deixa a
           fila ativa (troca com a última e truncamento), mas continua no
           resultado.

    Args:
        width:
            Largura do domínio.
        height:
            Altura do domínio.
        radius:
            Distância mínima entre pontos (raio de teste).
        point_radius:
            Raio do elemento; define o recuo das bordas do domínio.
        exclusion_zones:
            Zonas de exclusão já normalizadas, no referencial local.
        rng:
            Instância opcional de `random.Random`. Se `None`, será
            utilizado o gerador global do módulo `random`.
        k:
            Número máximo de candidatos por amostra ativa.
        seed_attempts:
            Número de sorteios permitidos para o ponto inicial.
        epsilon:
            Folga somada ao raio na posição dos candidatos.

    Returns:
        Lista de `Point` na ordem de aceitação. Lista vazia indica falha
        na fase semente para este raio (inclusive em domínios degenerados,
        com largura ou altura menor ou igual a `2 * point_radius`).
    """
    if rng is None:
        rng = random

    if not all(math.isfinite(v) for v in (width, height, radius, point_radius)):
        raise ValueError("Dimensões e raios devem ser números finitos.")
    if width <= 0.0 or height <= 0.0:
        raise ValueError("As dimensões do domínio devem ser maiores que zero.")
    if radius <= 0.0:
        raise ValueError("radius deve ser maior que zero.")
    if point_radius < 0.0:
        raise ValueError("point_radius não pode ser negativo.")
    if k < 1:
        raise ValueError("k deve ser pelo menos 1.")
    if seed_attempts < 1:
        raise ValueError("seed_attempts deve ser pelo menos 1.")

    grid = SpatialGrid(width, height, radius)
    active: List[Sample] = []
    accepted: List[Point] = []

    def _accept(x: float, y: float, parent: Optional[Sample]) -> None:
        sample = Sample(point=Point(x, y), parent=parent)
        grid.insert(sample)
        active.append(sample)
        accepted.append(sample.point)

    # Fase semente
    for _ in range(seed_attempts):
        x, y = sample_point_in_inset_rect(width, height, point_radius, rng)
        if not _in_inset_domain(x, y, width, height, point_radius):
            continue
        if count_zone_collisions(x, y, exclusion_zones) == 0:
            _accept(x, y, None)
            break
    else:
        return []

    # Fase de crescimento
    distance = radius + epsilon
    while active:
        i = int(rng.random() * len(active))
        parent = active[i]

        for x, y in ring_candidates(parent.x, parent.y, distance, k, rng):
            if (
                _in_inset_domain(x, y, width, height, point_radius)
                and grid.is_far(x, y)
                and count_zone_collisions(x, y, exclusion_zones) == 0
            ):
                _accept(x, y, parent)
                break
        else:
            last = active.pop()
            if i < len(active):
                active[i] = last

    return accepted


__all__: Sequence[str] = ["count_zone_collisions", "poisson_disc_sample"]
