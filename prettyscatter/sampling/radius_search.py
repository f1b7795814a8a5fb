from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence

from prettyscatter.config import ScatterConfig
from prettyscatter.core.models import (
    AttemptRecord,
    DistributionResult,
    FailureReason,
    Point,
    Rect,
)
from prettyscatter.sampling.poisson_sampler import poisson_disc_sample


def adjust_radius(
    radius: float,
    got_count: int,
    target_count: int,
    step: float,
) -> float:
    """
    Aplica o ajuste proporcional do raio de teste.

    Excesso de pontos aumenta o raio (espalha mais, reduz a quantidade);
    falta de pontos diminui o raio. O fator é
    `1 + step * (got_count - target_count) / target_count`.
    """
    return radius * (1.0 + step * (got_count - target_count) / target_count)


def _validate_inputs(
    width: float,
    height: float,
    point_radius: float,
    target_count: int,
) -> None:
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError("As dimensões do domínio devem ser números finitos.")
    if not math.isfinite(point_radius):
        raise ValueError("point_radius deve ser um número finito.")
    if width <= 0.0 or height <= 0.0:
        raise ValueError("As dimensões do domínio devem ser maiores que zero.")
    if point_radius <= 0.0:
        raise ValueError("point_radius deve ser maior que zero.")
    if isinstance(target_count, bool) or not isinstance(target_count, int):
        raise ValueError("target_count deve ser um número inteiro.")
    if target_count < 0:
        raise ValueError("target_count não pode ser negativo.")


def find_distribution(
    width: float,
    height: float,
    point_radius: float,
    target_count: int,
    exclusion_zones: Sequence[Rect] = (),
    config: Optional[ScatterConfig] = None,
    rng: Optional[random.Random] = None,
) -> DistributionResult:
    """
    Procura uma distribuição de exatamente `target_count` pontos.

    O amostrador de Poisson em disco é chamado repetidamente. Após cada
    tentativa cuja quantidade de pontos difere da alvo, o raio de teste é
    corrigido por `adjust_radius`. Trata-se de um controlador
    proporcional, não de uma busca binária: pode oscilar ou não convergir
    dentro de `config.iteration_limit` tentativas, o que é uma limitação
    aceita da heurística.

    A distribuição só é aceita se a última tentativa produziu a
    quantidade alvo com raio maior ou igual a
    `config.min_allowed_radius_multiple * point_radius`. Com um raio
    menor os elementos ficariam sobrepostos, e o resultado é rejeitado
    mesmo que a quantidade coincida.

    Args:
        width:
            Largura do domínio.
        height:
            Altura do domínio.
        point_radius:
            Raio do elemento (meia diagonal da caixa delimitadora).
        target_count:
            Quantidade de pontos desejada.
        exclusion_zones:
            Zonas de exclusão já normalizadas.
        config:
            Parâmetros da busca. Se `None`, usa `ScatterConfig()`.
        rng:
            Gerador de números aleatórios. Se `None`, é criado a partir
            de `config.random_seed`.

    Returns:
        `DistributionResult`. Em caso de falha, `points` é vazio e
        `failure_reason` é `COUNT_MISMATCH` ou `RADIUS_TOO_SMALL`.

    Raises:
        ValueError:
            Para entradas que violam o contrato (dimensões ou raio não
            positivos ou não finitos, quantidade alvo negativa).
    """
    _validate_inputs(width, height, point_radius, target_count)

    if config is None:
        config = ScatterConfig()
    if rng is None:
        rng = config.make_rng()

    radius = point_radius * config.initial_radius_multiple
    min_radius = point_radius * config.min_allowed_radius_multiple

    if target_count == 0:
        return DistributionResult(success=True, points=[], radius=radius, iterations=0)

    attempts: List[AttemptRecord] = []
    points: List[Point] = []
    iterations = 0

    while iterations < config.iteration_limit and len(points) != target_count:
        points = poisson_disc_sample(
            width,
            height,
            radius,
            point_radius,
            exclusion_zones,
            rng=rng,
            k=config.max_candidates,
            seed_attempts=config.seed_attempts,
            epsilon=config.candidate_epsilon,
        )
        iterations += 1
        attempts.append(AttemptRecord(iteration=iterations, radius=radius, count=len(points)))

        if len(points) != target_count:
            radius = adjust_radius(
                radius,
                len(points),
                target_count,
                config.radius_adjustment_step,
            )

    if len(points) != target_count:
        reason = FailureReason.COUNT_MISMATCH
    elif radius < min_radius:
        reason = FailureReason.RADIUS_TOO_SMALL
    else:
        return DistributionResult(
            success=True,
            points=points,
            radius=radius,
            iterations=iterations,
            attempts=attempts,
        )

    return DistributionResult(
        success=False,
        points=[],
        radius=attempts[-1].radius,
        iterations=iterations,
        failure_reason=reason,
        attempts=attempts,
    )


__all__: Sequence[str] = ["adjust_radius", "find_distribution"]
