"""Registry of named models to extract."""

from typing import Dict, Iterator, Optional, Type

from pydantic import BaseModel


class ModelRegistry:
    """Named collection of model classes.

    Any object exposing a ``models`` mapping is accepted by the extractor;
    this class is the in-package implementation of that contract.
    """

    def __init__(self, models: Optional[Dict[str, Type[BaseModel]]] = None) -> None:
        self._models: Dict[str, Type[BaseModel]] = dict(models or {})

    @property
    def models(self) -> Dict[str, Type[BaseModel]]:
        """Registered models keyed by name."""
        return self._models

    def register(self, model: Type[BaseModel], name: Optional[str] = None) -> Type[BaseModel]:
        """Register a model class.

        Args:
            model: Model class to register
            name: Registration name, defaults to the class name

        Returns:
            The registered model, so the method can be used as a class decorator
        """
        self._models[name or model.__name__] = model
        return model

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)
