from catalog_gateway.dispatcher import IntentDispatcher
from catalog_gateway.errors import ClassifierError
from catalog_gateway.models import GatewayQuery
from catalog_gateway.tools.registry import (
    CheckStock,
    CheckStockArgs,
    NoOp,
    SearchProducts,
    SearchProductsArgs,
)
from .conftest import FakeClassifier


class BrokenClassifier:
    def classify(self, message):
        raise ClassifierError("Intent classification failed")


def test_product_id_and_size_take_direct_stock_path(catalog):
    classifier = FakeClassifier()
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(productId="7001", size="44", message="is it in stock?"))

    assert classifier.messages == []
    assert data["productId"] == 7001
    assert data["sku"] == "TR-44-A"


def test_url_and_size_take_direct_stock_path(catalog):
    dispatcher = IntentDispatcher(catalog, FakeClassifier())

    data = dispatcher.dispatch(GatewayQuery(url="https://shop.example.com/prodotto/scarpa-urban/", size="41"))

    assert data["productId"] == 7002
    assert data["stockQuantity"] is None


def test_explicit_query_beats_message(catalog):
    classifier = FakeClassifier()
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(q="trail", message="check stock of 7001 in 44", debug=True))

    assert classifier.messages == []
    assert [result["id"] for result in data["results"]] == [7001]
    assert data["meta"]["count"] == 1


def test_stock_path_beats_explicit_query(catalog):
    classifier = FakeClassifier()
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(q="trail", productId=7001, size="42"))

    assert data["sku"] == "TR-42"


def test_product_id_without_size_is_not_direct(catalog):
    classifier = FakeClassifier(NoOp(text="Which size?"))
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(productId=7001, message="is 7001 available?"))

    assert classifier.messages == ["is 7001 available?"]
    assert data == {"reply": "Which size?"}


def test_inferred_search(catalog):
    classifier = FakeClassifier(SearchProducts(args=SearchProductsArgs(query="scarpa", size="44")))
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(message="scarpe taglia 44"))

    assert classifier.messages == ["scarpe taglia 44"]
    assert [result["id"] for result in data["results"]] == [7001]
    assert "meta" not in data


def test_inferred_search_honours_debug(catalog):
    classifier = FakeClassifier(SearchProducts(args=SearchProductsArgs(query="scarpa")))
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(message="scarpe", debug=True))

    assert data["meta"]["count"] == len(data["results"]) == 2


def test_inferred_check_stock(catalog):
    classifier = FakeClassifier(CheckStock(args=CheckStockArgs(size="44", productUrl="https://shop.example.com/prodotto/scarpa-trail/")))
    dispatcher = IntentDispatcher(catalog, classifier)

    data = dispatcher.dispatch(GatewayQuery(message="la scarpa trail c'è in 44?"))

    assert data == {
        "productId": 7001,
        "product": "Scarpa Trail - 44",
        "size": "44",
        "stockQuantity": 2,
        "stockStatus": "instock",
        "sku": "TR-44-A",
    }


def test_inferred_check_stock_without_identifier(catalog):
    classifier = FakeClassifier(CheckStock(args=CheckStockArgs(size="44")))
    dispatcher = IntentDispatcher(catalog, classifier)

    assert dispatcher.dispatch(GatewayQuery(message="c'è in 44?")) == {"error": "A productId or productUrl is required"}


def test_fallback_reply(catalog):
    dispatcher = IntentDispatcher(catalog, FakeClassifier(NoOp(text="Ciao!")))

    assert dispatcher.dispatch(GatewayQuery(message="ciao")) == {"reply": "Ciao!"}


def test_fallback_reply_defaults_to_empty_string(catalog):
    dispatcher = IntentDispatcher(catalog, FakeClassifier(NoOp()))

    assert dispatcher.dispatch(GatewayQuery()) == {"reply": ""}


def test_classifier_failure_becomes_error_envelope(catalog):
    dispatcher = IntentDispatcher(catalog, BrokenClassifier())

    assert dispatcher.dispatch(GatewayQuery(message="ciao")) == {"error": "Intent classification failed"}


def test_identical_requests_give_identical_responses(catalog):
    dispatcher = IntentDispatcher(catalog, FakeClassifier())
    query = GatewayQuery(url="https://shop.example.com/prodotto/scarpa-trail/", size="44")

    assert dispatcher.dispatch(query) == dispatcher.dispatch(query)
