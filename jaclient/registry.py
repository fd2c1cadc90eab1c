from typing import Any, Mapping, Optional, Union
from .errors import NotFoundError
from .model_config import ModelDefinition, ModelOptions


class ModelRegistry:
    """
    Model definitions by model name, owned by the client
    """

    def __init__(self) -> None:
        self._models: dict[str, ModelDefinition] = {}

    def define(self, name: str, attributes: Mapping[str, Any], options: Optional[Union[ModelOptions, Mapping[str, Any]]] = None) -> ModelDefinition:
        """
        Register a model, an existing definition with the same name is replaced
        :param name: model name
        :param attributes: attribute name => attribute spec or RelationshipSpec
        :param options: ModelOptions or a dict of option overrides
        :return: the new ModelDefinition
        """
        if options is None:
            options = ModelOptions()
        elif not isinstance(options, ModelOptions):
            options = ModelOptions().with_overrides(options)
        model = ModelDefinition(name, dict(attributes), options)
        self._models[name] = model
        return model

    def get(self, name: str) -> Optional[ModelDefinition]:
        return self._models.get(name)

    def model_for(self, name: str) -> ModelDefinition:
        model = self._models.get(name)
        if model is None:
            raise NotFoundError(f'API resource definition for model "{name}" not found. Available models: {list(self._models)}')
        return model

    def relationship_for(self, model_name: str, rel_name: str) -> Any:
        """
        :return: the attribute spec named `rel_name`, callers check whether it is a relationship
        """
        model = self.model_for(model_name)
        try:
            return model.attributes[rel_name]
        except KeyError:
            raise NotFoundError(
                f'API resource definition on model "{model_name}" for relationship "{rel_name}" not found. '
                f"Available attributes: {list(model.attributes)}"
            )

    def __contains__(self, name: str) -> bool:
        return name in self._models

    def __iter__(self):
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)
