from __future__ import annotations

import math
import random
from typing import Iterator, Optional, Sequence, Tuple


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Cria um gerador de números aleatórios independente.

    Toda a geração de pontos recebe o gerador explicitamente, sem usar o
    estado global do módulo `random`. Para reprodutibilidade, basta
    fornecer uma semente fixa.

    Args:
        seed:
            Semente do gerador. Se `None`, o gerador é inicializado a
            partir da fonte de entropia do sistema.

    Returns:
        Instância de `random.Random`.
    """
    return random.Random(seed)


def sample_point_in_inset_rect(
    width: float,
    height: float,
    inset: float,
    rng: Optional[random.Random] = None,
) -> Tuple[float, float]:
    """
    Gera um ponto uniforme dentro de `[0, width] x [0, height]` recuado
    de `inset` em cada lado.

    O ponto é sorteado em `[inset, width - inset)` no eixo X e em
    `[inset, height - inset)` no eixo Y. Se o recuo for maior ou igual à
    metade de uma dimensão, o intervalo resultante é vazio ou invertido e
    o ponto devolvido cai fora da região útil; cabe ao chamador rejeitá-lo.

    Args:
        width:
            Largura do domínio.
        height:
            Altura do domínio.
        inset:
            Recuo aplicado a cada borda (normalmente o raio do elemento).
        rng:
            Instância opcional de `random.Random`. Se `None`, será
            utilizado o gerador global do módulo `random`.

    Returns:
        Tupla `(x, y)` com o ponto sorteado.
    """
    if rng is None:
        rng = random

    x = inset + rng.random() * (width - 2.0 * inset)
    y = inset + rng.random() * (height - 2.0 * inset)
    return x, y


def ring_candidates(
    center_x: float,
    center_y: float,
    distance: float,
    k: int,
    rng: Optional[random.Random] = None,
) -> Iterator[Tuple[float, float]]:
    """
    Gera `k` candidatos igualmente espaçados em um círculo.

    Os ângulos são `2 * pi * (seed + j / k)` para `j = 0..k-1`, com um
    único `seed` aleatório compartilhado pelas `k` posições. Assim os
    candidatos cobrem todo o círculo em torno do centro, com rotação
    aleatória.

    Args:
        center_x:
            Coordenada X do centro.
        center_y:
            Coordenada Y do centro.
        distance:
            Distância de cada candidato ao centro.
        k:
            Número de candidatos.
        rng:
            Instância opcional de `random.Random`. Se `None`, será
            utilizado o gerador global do módulo `random`.

    Returns:
        Um iterador preguiçoso de tuplas `(x, y)`; o ângulo inicial é
        sorteado no momento da chamada.
    """
    if rng is None:
        rng = random

    seed = rng.random()

    def _generate() -> Iterator[Tuple[float, float]]:
        for j in range(k):
            angle = 2.0 * math.pi * (seed + j / k)
            yield (
                center_x + distance * math.cos(angle),
                center_y + distance * math.sin(angle),
            )

    return _generate()


__all__: Sequence[str] = [
    "make_rng",
    "sample_point_in_inset_rect",
    "ring_candidates",
]
