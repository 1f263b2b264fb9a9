"""
Precision — Типы элементов комплексного числа

Поддерживаемые форматы IEEE-754:
- binary32 (numpy.float32)
- binary64 (numpy.float64)

Модуль связывает имя формата с numpy dtype и с толерантностью по умолчанию
для приближённых сравнений. Сам тип Complex эпсилон-сравнений не выполняет.
"""

from enum import Enum
from typing import Final

import numpy as np


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность сравнения для binary64 (алгебраические законы, сценарии)
EPS_COMPARE_BINARY64: Final[float] = 1e-10

# Толерантность сравнения для binary32 (машинный epsilon ~1.19e-7)
EPS_COMPARE_BINARY32: Final[float] = 1e-4

# Относительная толерантность для binary32 (ошибка растёт с величиной операндов)
EPS_COMPARE_REL_BINARY32: Final[float] = 1e-5

# Относительная толерантность для binary64
EPS_COMPARE_REL_BINARY64: Final[float] = 1e-12


# =============================================================================
# ТИПЫ
# =============================================================================


class Precision(str, Enum):
    """Формат элемента комплексного числа"""

    BINARY32 = "binary32"
    BINARY64 = "binary64"

    @property
    def dtype(self) -> type[np.floating]:
        """numpy-тип компонент (float32 или float64)"""
        return _DTYPES[self]

    @property
    def tolerance(self) -> float:
        """Толерантность сравнения по умолчанию"""
        return _TOLERANCES[self]

    @property
    def rel_tolerance(self) -> float:
        """Относительная толерантность сравнения по умолчанию"""
        return _REL_TOLERANCES[self]

    @classmethod
    def of(cls, value: np.floating) -> "Precision":
        """
        Определение формата по numpy-скаляру.

        Args:
            value: numpy.float32 или numpy.float64

        Returns:
            Соответствующий Precision

        Raises:
            TypeError: Если value не является float32/float64 скаляром
        """
        for precision, dtype in _DTYPES.items():
            if isinstance(value, dtype):
                return precision
        raise TypeError(
            f"Expected numpy.float32 or numpy.float64 scalar, got {type(value).__name__}"
        )


_DTYPES: Final[dict[Precision, type[np.floating]]] = {
    Precision.BINARY32: np.float32,
    Precision.BINARY64: np.float64,
}

_TOLERANCES: Final[dict[Precision, float]] = {
    Precision.BINARY32: EPS_COMPARE_BINARY32,
    Precision.BINARY64: EPS_COMPARE_BINARY64,
}

_REL_TOLERANCES: Final[dict[Precision, float]] = {
    Precision.BINARY32: EPS_COMPARE_REL_BINARY32,
    Precision.BINARY64: EPS_COMPARE_REL_BINARY64,
}
