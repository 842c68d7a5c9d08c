import json
from typing import List

import pytest
from pydantic import ValidationError

from moysklad import (
    Counterparty,
    EntityList,
    JsonSerializer,
    ManyBody,
    Meta,
    Product,
    SingleBody,
)


@pytest.fixture
def serializer() -> JsonSerializer:
    return JsonSerializer()


class TestJsonSerializer:
    class TestSerialize:
        def test_single_body_uses_aliases_and_skips_none(
            self, serializer: JsonSerializer
        ):
            product = Product(
                name="Widget",
                external_code="W-1",
                meta=Meta(href="https://api.moysklad.test/p/1", type="product"),
            )

            result = json.loads(serializer.serialize(SingleBody(product)))

            assert result == {
                "name": "Widget",
                "externalCode": "W-1",
                "meta": {"href": "https://api.moysklad.test/p/1", "type": "product"},
            }

        def test_many_body_keeps_each_entity_type(self, serializer: JsonSerializer):
            body = ManyBody(
                [
                    Product(name="Widget", path_name="Tools"),
                    Counterparty(name="ACME", company_type="legal"),
                ]
            )

            result = json.loads(serializer.serialize(body))

            assert result == [
                {"name": "Widget", "pathName": "Tools"},
                {"name": "ACME", "companyType": "legal"},
            ]

        def test_plain_entity_is_serialized_as_single(self, serializer: JsonSerializer):
            assert json.loads(serializer.serialize(Product(name="Widget"))) == {
                "name": "Widget"
            }

        def test_extra_fields_are_kept(self, serializer: JsonSerializer):
            product = Product.model_validate({"name": "Widget", "vat": 20})

            assert json.loads(serializer.serialize(SingleBody(product))) == {
                "name": "Widget",
                "vat": 20,
            }

        def test_unknown_body_raises(self, serializer: JsonSerializer):
            with pytest.raises(TypeError):
                serializer.serialize({"name": "Widget"})  # type: ignore[arg-type]

    class TestDeserialize:
        def test_single_entity(self, serializer: JsonSerializer):
            product = serializer.deserialize(
                '{"id": "p-1", "accountId": "acc", "externalCode": "W-1"}', Product
            )

            assert product.id == "p-1"
            assert product.account_id == "acc"
            assert product.external_code == "W-1"

        def test_list_of_entities(self, serializer: JsonSerializer):
            products = serializer.deserialize(
                '[{"id": "p-1"}, {"id": "p-2"}]', List[Product]
            )

            assert [p.id for p in products] == ["p-1", "p-2"]

        def test_entity_list_page(self, serializer: JsonSerializer):
            content = json.dumps(
                {
                    "context": {"employee": {}},
                    "meta": {"size": 1, "limit": 1000, "offset": 0},
                    "rows": [{"id": "c-1", "companyType": "individual"}],
                }
            )

            page = serializer.deserialize(content, EntityList[Counterparty])

            assert page.meta.limit == 1000
            assert isinstance(page.rows[0], Counterparty)
            assert page.rows[0].company_type == "individual"

        def test_invalid_json_raises(self, serializer: JsonSerializer):
            with pytest.raises(ValidationError):
                serializer.deserialize("{", Product)
