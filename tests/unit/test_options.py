import httpx

from dappier import DappierApp
from dappier.options import (
    with_base_url,
    with_http_client,
    with_num_articles_ref,
    with_ref,
    with_similarity_top_k,
)
from dappier.types import RecommendationsRequest


class TestRecommendationsOptions:
    def test_with_similarity_top_k(self):
        request = RecommendationsRequest(query="q")
        with_similarity_top_k(5)(request)
        assert request.similarity_top_k == 5

    def test_with_ref(self):
        request = RecommendationsRequest(query="q")
        with_ref("techcrunch.com")(request)
        assert request.ref == "techcrunch.com"

    def test_with_num_articles_ref(self):
        request = RecommendationsRequest(query="q")
        with_num_articles_ref(3)(request)
        assert request.num_articles_ref == 3

    def test_options_mutate_one_field_each(self):
        """Each option leaves the other fields untouched."""
        request = RecommendationsRequest(query="q")
        with_ref("techcrunch.com")(request)

        assert request.query == "q"
        assert request.similarity_top_k == 9
        assert request.num_articles_ref == 0

    def test_later_option_wins(self):
        """Options are applied in order, so the last one for a field wins."""
        request = RecommendationsRequest(query="q")
        for option in (with_similarity_top_k(3), with_similarity_top_k(7)):
            option(request)
        assert request.similarity_top_k == 7

    def test_options_produce_serialized_fields(self):
        request = RecommendationsRequest(query="q")
        with_similarity_top_k(5)(request)
        with_ref("techcrunch.com")(request)

        body = request.model_dump_json()
        assert '"similarity_top_k":5' in body
        assert '"ref":"techcrunch.com"' in body


class TestClientOptions:
    def test_with_http_client(self):
        custom = httpx.Client()
        app = DappierApp("mock-api-key", with_http_client(custom))
        assert app.http_client is custom
        custom.close()

    def test_with_base_url(self):
        app = DappierApp("mock-api-key", with_base_url("http://localhost:9999/x"))
        assert app.base_url == "http://localhost:9999/x"
        assert app.config.realtime_url() == "http://localhost:9999/x"
        app.close()
