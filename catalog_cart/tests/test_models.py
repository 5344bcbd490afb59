import pytest

from catalog_cart.models import ClothingItem, ElectronicItem, GroceryItem, format_number


def test_electronics_price_adds_warranty_fee():
    assert ElectronicItem("Phone", 500.0, 12).price() == 620.0
    assert ElectronicItem("Cable", 5.5, 0).price() == 5.5


def test_clothing_price_applies_markup():
    assert ClothingItem("Shirt", 20.0, "M").price() == pytest.approx(22.0)
    assert ClothingItem("Hat", 0.0, "S").price() == 0.0


def test_grocery_price_is_per_kg():
    assert GroceryItem("Rice", 2.0, 5.0).price() == 10.0
    assert GroceryItem("Salt", 3.0, 0.0).price() == 0.0


def test_price_is_stable():
    item = ClothingItem("Shirt", 19.99, "L")
    assert item.price() == item.price()


def test_negative_values_are_not_rejected():
    assert ElectronicItem("Refund", -100.0, 2).price() == -80.0


def test_labels():
    assert ElectronicItem.label == "Electronics"
    assert ClothingItem.label == "Clothing"
    assert GroceryItem.label == "Grocery"


def test_display_lines():
    assert ElectronicItem("Phone", 500.0, 12).display_line() == (
        "[Electronics] Phone - $620.00 (warranty: 12 months)"
    )
    assert ClothingItem("Shirt", 20.0, "M").display_line() == "[Clothing] Shirt - $22.00 (size: M)"
    assert GroceryItem("Rice", 2.0, 5.0).display_line() == (
        "[Grocery] Rice - $10.00 (weight: 5.00 kg)"
    )


def test_records():
    assert ElectronicItem("Phone", 500.0, 12).record() == "Electronics,Phone,620,12"
    assert ClothingItem("Shirt", 20.0, "M").record() == "Clothing,Shirt,22,M"
    assert GroceryItem("Rice", 2.0, 5.0).record() == "Grocery,Rice,10,5kg"
    assert GroceryItem("Apples", 1.5, 2.5).record() == "Grocery,Apples,3.75,2.5kg"


def test_record_does_not_escape_commas():
    assert ClothingItem("Shirt, blue", 10.0, "M").record() == "Clothing,Shirt, blue,11,M"


def test_format_number():
    assert format_number(620.0) == "620"
    assert format_number(20.0 * 1.10) == "22"
    assert format_number(0.5) == "0.5"
    assert format_number(1234567.0) == "1234567"
    assert format_number(1234.56 * 1.10) == "1358.016"


def test_items_are_immutable():
    item = ElectronicItem("Phone", 500.0, 12)
    with pytest.raises(AttributeError):
        item.base_price = 1.0
