"""Tests for declaration model records and their serialization."""

import dataclasses
import json
import unittest

from extraction.models import (
    ClassModel,
    ConstructorModel,
    EnumModel,
    EnumValueModel,
    InterfaceModel,
    MethodModel,
    ModifierKind,
    ParameterModel,
    PropertyModel,
    SourceModel,
)


def _sample_model() -> SourceModel:
    return SourceModel(
        path="/src/Person.cs",
        classes=(
            ClassModel(
                name="Person",
                modifier=ModifierKind.PUBLIC,
                properties=(PropertyModel("Name", "string", ModifierKind.PUBLIC),),
                methods=(
                    MethodModel(
                        "Rename",
                        "void",
                        ModifierKind.PUBLIC,
                        (ParameterModel("name", "string"),),
                    ),
                ),
                constructors=(
                    ConstructorModel("Person", ModifierKind.PUBLIC, (ParameterModel("age", "int"),)),
                ),
            ),
        ),
        interfaces=(InterfaceModel(name="IPerson", modifier=ModifierKind.INTERNAL),),
        enums=(
            EnumModel(
                name="Kind",
                modifier=ModifierKind.PRIVATE,
                values=(EnumValueModel("A", "no-value"),),
            ),
        ),
    )


class TestModels(unittest.TestCase):
    def test_models_are_immutable(self) -> None:
        model = _sample_model()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            model.path = "/other.cs"

    def test_default_collections_are_empty(self) -> None:
        model = SourceModel(path="a.cs")
        self.assertEqual((model.classes, model.interfaces, model.enums), ((), (), ()))
        self.assertTrue(model.is_empty)

    def test_declaration_count(self) -> None:
        self.assertEqual(_sample_model().declaration_count, 3)

    def test_to_dict_shape(self) -> None:
        payload = _sample_model().to_dict()
        self.assertEqual(payload["path"], "/src/Person.cs")
        person = payload["classes"][0]
        self.assertEqual(person["modifier"], "Public")
        self.assertEqual(person["language"], "csharp")
        self.assertEqual(
            person["methods"][0],
            {
                "name": "Rename",
                "return_type": "void",
                "modifier": "Public",
                "parameters": [{"name": "name", "type": "string"}],
            },
        )
        self.assertEqual(person["constructors"][0]["parameters"], [{"name": "age", "type": "int"}])
        self.assertNotIn("constructors", payload["interfaces"][0])
        self.assertEqual(payload["enums"][0]["values"], [{"name": "A", "value": "no-value"}])

    def test_to_dict_is_json_serializable(self) -> None:
        encoded = json.dumps(_sample_model().to_dict())
        self.assertIn('"modifier": "Internal"', encoded)


if __name__ == "__main__":
    unittest.main()
