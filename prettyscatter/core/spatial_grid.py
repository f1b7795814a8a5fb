from __future__ import annotations

import math
from typing import Iterable, List, Optional, Tuple

from prettyscatter.core.models import Sample


class SpatialGrid:
    """
    Grade uniforme em memória para consultas de proximidade 2D.

    A grade cobre o retângulo `[0, width] x [0, height]` com células
    quadradas de lado `radius / sqrt(2)`. Com esse tamanho a diagonal de
    uma célula é igual ao raio, o que garante que cada célula contenha no
    máximo uma amostra aceita para o raio corrente.

    A grade é descartável: deve ser recriada a cada chamada do amostrador,
    pois suas dimensões dependem do raio de teste.

    Uso típico:
        1. Criar uma instância com as dimensões do domínio e o raio.
        2. Consultar `is_far(x, y)` para cada candidato.
        3. Registrar amostras aceitas com `insert(sample)`.
    """

    # Um ponto a distância menor que o raio fica no máximo a duas células
    # de distância em cada eixo (ceil(sqrt(2)) == 2).
    NEIGHBOR_SPAN = 2

    def __init__(self, width: float, height: float, radius: float) -> None:
        """
        Inicializa uma grade vazia.

        Args:
            width:
                Largura do domínio coberto pela grade.
            height:
                Altura do domínio coberto pela grade.
            radius:
                Distância mínima entre amostras. Deve ser positiva.
        """
        if radius <= 0.0:
            raise ValueError("radius deve ser maior que zero.")

        self.radius = radius
        self.radius2 = radius * radius
        self.cell_size = radius * math.sqrt(0.5)
        self.grid_width = max(int(math.ceil(width / self.cell_size)), 1)
        self.grid_height = max(int(math.ceil(height / self.cell_size)), 1)
        self._cells: List[Optional[Sample]] = [None] * (
            self.grid_width * self.grid_height
        )
        self._count = 0

    # ------------------------------------------------------------------
    # Operações básicas
    # ------------------------------------------------------------------

    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        """
        Retorna os índices `(coluna, linha)` da célula que contém (x, y).

        Coordenadas fora do domínio são limitadas à borda da grade.
        """
        i = min(max(int(x / self.cell_size), 0), self.grid_width - 1)
        j = min(max(int(y / self.cell_size), 0), self.grid_height - 1)
        return i, j

    def insert(self, sample: Sample) -> None:
        """
        Registra uma amostra aceita na célula correspondente.

        O chamador é responsável por ter verificado `is_far` antes; a
        grade não valida a distância novamente.
        """
        i, j = self.cell_of(sample.x, sample.y)
        self._cells[j * self.grid_width + i] = sample
        self._count += 1

    def __len__(self) -> int:
        return self._count

    # ------------------------------------------------------------------
    # Consultas de vizinhança
    # ------------------------------------------------------------------

    def is_far(self, x: float, y: float) -> bool:
        """
        Indica se (x, y) está a pelo menos `radius` de todas as amostras.

        Apenas a janela de 5x5 células ao redor da célula do candidato é
        examinada. A comparação é exata, usando a distância euclidiana ao
        quadrado.
        """
        i, j = self.cell_of(x, y)
        i0 = max(i - self.NEIGHBOR_SPAN, 0)
        j0 = max(j - self.NEIGHBOR_SPAN, 0)
        i1 = min(i + self.NEIGHBOR_SPAN + 1, self.grid_width)
        j1 = min(j + self.NEIGHBOR_SPAN + 1, self.grid_height)

        for row in range(j0, j1):
            offset = row * self.grid_width
            for col in range(i0, i1):
                sample = self._cells[offset + col]
                if sample is None:
                    continue
                dx = sample.x - x
                dy = sample.y - y
                if dx * dx + dy * dy < self.radius2:
                    return False
        return True

    # ------------------------------------------------------------------
    # Utilidades adicionais
    # ------------------------------------------------------------------

    def samples(self) -> Iterable[Sample]:
        """
        Itera sobre as amostras armazenadas, em ordem de célula.

        Útil para depuração e testes.
        """
        for sample in self._cells:
            if sample is not None:
                yield sample


__all__ = ["SpatialGrid"]
