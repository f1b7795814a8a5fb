from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from prettyscatter.core.random_utils import make_rng


@dataclass
class ScatterConfig:
    """
    Configurações da busca de distribuição de pontos.

    Esta classe agrupa os parâmetros ajustáveis usados pelo amostrador de
    Poisson em disco, pela busca adaptativa de raio e pela camada de
    adaptação. Todos os valores são padrões heurísticos: não há garantia
    de convergência, e outros valores podem funcionar melhor para cenas
    específicas.

    Atributos gerais:
        random_seed:
            Semente do gerador de números aleatórios. Se `None`, cada
            sessão usa uma semente diferente.

    Atributos da busca de raio:
        iteration_limit:
            Número máximo de chamadas ao amostrador em uma busca.
        min_allowed_radius_multiple:
            Raio mínimo aceitável, como múltiplo do raio do elemento.
            Distribuições que só coincidem com a quantidade alvo abaixo
            deste raio são rejeitadas.
        initial_radius_multiple:
            Raio de teste inicial, como múltiplo do raio do elemento.
        radius_adjustment_step:
            Ganho do ajuste proporcional do raio entre tentativas.

    Atributos do amostrador:
        max_candidates:
            Número máximo de candidatos gerados ao redor de cada amostra
            ativa antes que ela seja retirada da fila (k).
        seed_attempts:
            Número de sorteios permitidos para encontrar o ponto inicial.
        candidate_epsilon:
            Folga somada ao raio ao posicionar candidatos, para que o
            arredondamento não os rejeite contra o próprio ponto de origem.

    Atributos da camada de adaptação:
        min_viewport_width:
            Largura mínima da janela de visualização para aplicar o
            espalhamento. Abaixo (ou igual) a ela o layout original é
            mantido.
        event_response_delay:
            Atraso, em segundos, aplicado a eventos de redimensionamento
            antes de recalcular o layout. Eventos novos cancelam o
            cálculo pendente.
    """

    # Parâmetros globais
    random_seed: Optional[int] = None

    # Busca de raio
    iteration_limit: int = 50
    min_allowed_radius_multiple: float = 1.3
    initial_radius_multiple: float = 1.8
    radius_adjustment_step: float = 0.05

    # Amostrador
    max_candidates: int = 8
    seed_attempts: int = 20
    candidate_epsilon: float = 1e-7

    # Camada de adaptação
    min_viewport_width: int = 0
    event_response_delay: float = 0.2

    def __post_init__(self) -> None:
        if self.iteration_limit < 1:
            raise ValueError("iteration_limit deve ser pelo menos 1.")
        if self.initial_radius_multiple <= 0.0:
            raise ValueError("initial_radius_multiple deve ser maior que zero.")
        if self.min_allowed_radius_multiple < 0.0:
            raise ValueError("min_allowed_radius_multiple não pode ser negativo.")
        if not 0.0 < self.radius_adjustment_step < 1.0:
            raise ValueError("radius_adjustment_step deve estar entre 0 e 1.")
        if self.max_candidates < 1:
            raise ValueError("max_candidates deve ser pelo menos 1.")
        if self.seed_attempts < 1:
            raise ValueError("seed_attempts deve ser pelo menos 1.")
        if self.candidate_epsilon < 0.0:
            raise ValueError("candidate_epsilon não pode ser negativo.")
        if self.event_response_delay < 0.0:
            raise ValueError("event_response_delay não pode ser negativo.")

    def make_rng(self) -> random.Random:
        """Cria o gerador de números aleatórios da sessão."""
        return make_rng(self.random_seed)


__all__: Sequence[str] = ["ScatterConfig"]
