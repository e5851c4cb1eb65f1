from pimshift.core.attributes import AttributeOptionValueDataTransformer, ProductOptionValueDataTransformer
from pimshift.core.canonical import ProductOption


def test_product_option_value_code_is_deterministic() -> None:
    transformer = ProductOptionValueDataTransformer()
    option = ProductOption(code="size")

    first = transformer.transform(option, "42")
    second = transformer.transform(option, "42")

    assert first == second == "size_42"


def test_product_option_value_code_slugifies_free_text() -> None:
    transformer = ProductOptionValueDataTransformer()

    assert transformer.transform(ProductOption(code="color"), "Bleu Ciel") == "color_bleu_ciel"
    assert transformer.transform(ProductOption(code="color"), "Crème") == "color_creme"


def test_codes_differ_per_option() -> None:
    transformer = ProductOptionValueDataTransformer()

    assert transformer.transform(ProductOption(code="size"), "red") != transformer.transform(
        ProductOption(code="color"), "red"
    )


def test_attribute_option_value_keeps_case() -> None:
    transformer = AttributeOptionValueDataTransformer()

    assert transformer.transform("Navy Blue") == "Navy_Blue"
    assert transformer.transform(38) == "38"
