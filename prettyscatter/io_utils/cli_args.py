from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from prettyscatter.config import ScatterConfig


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Cria e configura o parser de argumentos de linha de comando.

    Além dos caminhos de entrada e saída, o parser expõe todos os
    parâmetros ajustáveis de `ScatterConfig`, permitindo experimentar
    outros valores da heurística sem editar código. Argumentos não
    informados ficam com valor `None` e mantêm o padrão da configuração.

    Retorna:
        Uma instância de `argparse.ArgumentParser` pronta para uso.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Espalha elementos de tamanho uniforme em um contêiner "
            "retangular por amostragem de Poisson em disco, evitando "
            "zonas de exclusão."
        )
    )

    # ------------------------------------------------------------------
    # Grupo: entrada e saída
    # ------------------------------------------------------------------
    io_group = parser.add_argument_group("Entrada e saída")
    io_group.add_argument(
        "--scene",
        type=str,
        required=True,
        help="Arquivo JSON com a cena (contêiner, elementos e zonas).",
    )
    io_group.add_argument(
        "--out",
        type=str,
        default="out/placements.csv",
        help='Arquivo CSV de saída com as posições (padrão: "out/placements.csv").',
    )

    # ------------------------------------------------------------------
    # Grupo: busca de raio
    # ------------------------------------------------------------------
    search_group = parser.add_argument_group("Busca adaptativa de raio")
    search_group.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Semente do gerador de números aleatórios.",
    )
    search_group.add_argument(
        "--iteration-limit",
        type=int,
        default=None,
        help="Número máximo de tentativas de amostragem.",
    )
    search_group.add_argument(
        "--min-radius-multiple",
        type=float,
        default=None,
        help="Raio mínimo aceitável, como múltiplo do raio do elemento.",
    )
    search_group.add_argument(
        "--initial-radius-multiple",
        type=float,
        default=None,
        help="Raio inicial de teste, como múltiplo do raio do elemento.",
    )
    search_group.add_argument(
        "--radius-step",
        type=float,
        default=None,
        help="Ganho do ajuste proporcional do raio entre tentativas.",
    )

    # ------------------------------------------------------------------
    # Grupo: amostrador
    # ------------------------------------------------------------------
    sampler_group = parser.add_argument_group("Amostrador de Poisson em disco")
    sampler_group.add_argument(
        "--max-candidates",
        type=int,
        default=None,
        help="Candidatos gerados ao redor de cada amostra ativa (k).",
    )
    sampler_group.add_argument(
        "--seed-attempts",
        type=int,
        default=None,
        help="Sorteios permitidos para encontrar o ponto inicial.",
    )

    # ------------------------------------------------------------------
    # Grupo: adaptação
    # ------------------------------------------------------------------
    adapter_group = parser.add_argument_group("Camada de adaptação")
    adapter_group.add_argument(
        "--min-viewport-width",
        type=int,
        default=None,
        help="Largura mínima da janela para aplicar o espalhamento.",
    )

    return parser


# Mapeamento entre o destino do argparse e o campo de `ScatterConfig`.
_CONFIG_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("seed", "random_seed"),
    ("iteration_limit", "iteration_limit"),
    ("min_radius_multiple", "min_allowed_radius_multiple"),
    ("initial_radius_multiple", "initial_radius_multiple"),
    ("radius_step", "radius_adjustment_step"),
    ("max_candidates", "max_candidates"),
    ("seed_attempts", "seed_attempts"),
    ("min_viewport_width", "min_viewport_width"),
)


def config_from_namespace(parsed: argparse.Namespace) -> ScatterConfig:
    """
    Constrói um `ScatterConfig` a partir de argumentos já interpretados.

    Apenas os campos cujo argumento não é `None` são sobrescritos. A
    configuração final é recriada com `dataclasses.replace`, de modo que
    as validações de `ScatterConfig` também valem para a linha de
    comando.
    """
    overrides: Dict[str, Any] = {}
    for arg_name, field_name in _CONFIG_FIELDS:
        value = getattr(parsed, arg_name, None)
        if value is not None:
            overrides[field_name] = value
    return replace(ScatterConfig(), **overrides)


def config_from_args(args: Optional[List[str]] = None) -> ScatterConfig:
    """
    Constrói um `ScatterConfig` a partir da linha de comando.

    Args:
        args:
            Lista opcional de strings com os argumentos de linha de
            comando. Se `None`, os argumentos reais de `sys.argv` serão
            utilizados.

    Returns:
        Uma instância de `ScatterConfig` ajustada de acordo com os
        argumentos fornecidos.
    """
    parser = build_arg_parser()
    parsed = parser.parse_args(args=args)
    return config_from_namespace(parsed)


__all__ = ["build_arg_parser", "config_from_namespace", "config_from_args"]
