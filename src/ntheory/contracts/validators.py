"""
JSON Schema Contract Validators

Модуль для валидации JSON представлений результатов движка согласно
формальным JSON Schema контрактам (библиотека jsonschema, Draft 2020-12).

Схемы (src/ntheory/contracts/schema/):
- factor_map.json — FactorMap.to_dict()
- crt_result.json — CRTResult.to_dict()
- extended_gcd_result.json — ExtendedGcdResult.to_dict()
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'factor_map')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class FactorMapValidator(ContractValidator):
    """
    Валидатор для factor_map контракта.

    Помимо схемы проверяет семантический инвариант: произведение
    base^exponent по всем множителям равно value.
    """

    def __init__(self):
        super().__init__("factor_map")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)

        value = data["value"]
        if value == 0:
            if data["factors"]:
                raise ValidationError("factorization of 0 must have no factors")
            return

        product = 1
        for item in data["factors"]:
            product *= item["base"] ** item["exponent"]
        if product != value:
            raise ValidationError(f"factors reconstruct {product}, expected {value}")

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True


class CRTResultValidator(ContractValidator):
    """Валидатор для crt_result контракта."""

    def __init__(self):
        super().__init__("crt_result")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        if data["residue"] >= data["modulus"]:
            raise ValidationError(
                f"residue {data['residue']} must be < modulus {data['modulus']}"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True


class ExtendedGcdResultValidator(ContractValidator):
    """Валидатор для extended_gcd_result контракта."""

    def __init__(self):
        super().__init__("extended_gcd_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_factor_map(data: Dict[str, Any]) -> None:
    """
    Валидация factor_map данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FactorMapValidator().validate(data)


def validate_crt_result(data: Dict[str, Any]) -> None:
    """
    Валидация crt_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CRTResultValidator().validate(data)


def validate_extended_gcd_result(data: Dict[str, Any]) -> None:
    """
    Валидация extended_gcd_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ExtendedGcdResultValidator().validate(data)
