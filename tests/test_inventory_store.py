from inventory_tracker.domain.models import Dataset, Product, Rental, RentalStatus
from inventory_tracker.repositories import InventoryStore


def test_missing_file_loads_empty_dataset(store):
    dataset = store.load()
    assert dataset.products == []
    assert dataset.rentals == []


def test_invalid_json_loads_empty_dataset(data_path, store):
    data_path.parent.mkdir(parents=True)
    data_path.write_text("{not json", encoding="utf-8")
    dataset = store.load()
    assert dataset.products == []
    assert dataset.rentals == []


def test_empty_file_loads_empty_dataset(data_path, store):
    data_path.parent.mkdir(parents=True)
    data_path.write_text("", encoding="utf-8")
    assert store.load() == Dataset()


def test_legacy_list_becomes_products(write_document, store):
    write_document([{"id": 7, "name": "Saw", "price": 12.5, "quantity": 4}])
    dataset = store.load()
    assert dataset.products == [Product(id=7, name="Saw", price=12.5, quantity=4)]
    assert dataset.rentals == []


def test_missing_collections_are_normalized(write_document, store):
    write_document({"products": [{"id": 1, "name": "Tent", "price": 80, "quantity": 1}]})
    dataset = store.load()
    assert len(dataset.products) == 1
    assert dataset.rentals == []


def test_scalar_document_loads_empty_dataset(write_document, store):
    write_document(42)
    assert store.load() == Dataset()


def test_malformed_records_are_skipped(write_document, store):
    write_document(
        {
            "products": [
                {"id": 1, "name": "Tent", "price": 80, "quantity": 1},
                {"name": "No id"},
                "garbage",
            ],
            "rentals": [],
        }
    )
    dataset = store.load()
    assert [product.id for product in dataset.products] == [1]


def test_save_writes_complete_document(store, read_document):
    dataset = Dataset(
        products=[Product(id=1, name="Drill", price=49.99, quantity=3)],
        rentals=[
            Rental(
                rental_id=1700000000000,
                product_id=1,
                product_name="Drill",
                renter_name="Alice",
                rent_date="2024-01-01",
                return_date="2024-01-10",
                phone_number="555",
                address="X",
                amount_paid=10.0,
            )
        ],
    )
    assert store.save(dataset) is True
    document = read_document()
    assert document["products"] == [
        {"id": 1, "name": "Drill", "price": 49.99, "quantity": 3}
    ]
    rental = document["rentals"][0]
    assert rental["rentalId"] == 1700000000000
    assert rental["status"] == "active"
    assert "returnedDate" not in rental


def test_save_then_load_preserves_returned_rental(store):
    rental = Rental(
        rental_id=5,
        product_id=1,
        product_name="Drill",
        renter_name="Bob",
        rent_date="2024-01-01",
        return_date="2024-01-10",
        phone_number="555",
        address="Y",
        amount_paid=15.0,
        status=RentalStatus.RETURNED,
        returned_date="2024-01-09",
    )
    store.save(Dataset(products=[], rentals=[rental]))
    assert store.load().rentals == [rental]


def test_save_reports_failure_instead_of_raising(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = InventoryStore(blocker / "inventory.json")
    assert store.save(Dataset()) is False


def test_out_of_range_numbers_are_skipped(data_path, store):
    data_path.parent.mkdir(parents=True)
    data_path.write_text(
        '{"products": ['
        '{"id": 1, "name": "Huge", "price": 1, "quantity": 1e400},'
        '{"id": 2, "name": "Inf", "price": 1, "quantity": Infinity},'
        '{"id": 3, "name": "NaN", "price": NaN, "quantity": 1},'
        '{"id": 4, "name": "Negative", "price": 1, "quantity": -2},'
        '{"id": 5, "name": "Fine", "price": 1, "quantity": 1}'
        '], "rentals": []}',
        encoding="utf-8",
    )
    assert [product.id for product in store.load().products] == [5]


def test_save_refuses_non_finite_numbers(data_path, store):
    dataset = Dataset(products=[Product(id=1, name="X", price=float("inf"), quantity=1)])
    assert store.save(dataset) is False
    assert not data_path.exists()
