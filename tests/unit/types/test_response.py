import pytest
from pydantic import ValidationError

from dappier.types import (
    Article,
    RealtimeSearchResult,
    RealtimeSearchResultList,
    RecommendationsResult,
)


class TestRealtimeSearchResult:
    def test_decode_array(self):
        body = '[{"response": {"results": "Election Day is November 5, 2024"}}]'
        results = RealtimeSearchResultList.validate_json(body)

        assert len(results) == 1
        assert isinstance(results[0], RealtimeSearchResult)
        assert results[0].response.results == "Election Day is November 5, 2024"

    def test_missing_fields_default_to_empty(self):
        results = RealtimeSearchResultList.validate_json("[{}]")
        assert results[0].response.results == ""

    def test_object_instead_of_array_rejected(self):
        with pytest.raises(ValidationError):
            RealtimeSearchResultList.validate_json('{"response": {"results": "x"}}')

    def test_invalid_json_rejected(self):
        with pytest.raises(ValidationError):
            RealtimeSearchResultList.validate_json("invalid-json")


class TestRecommendationsResult:
    def test_decode_article(self, article):
        result = RecommendationsResult.model_validate({"results": [article]})
        decoded = result.results[0]

        assert isinstance(decoded, Article)
        assert decoded.title == "Test Title"
        assert decoded.image_url == "https://example.com/image.jpg"
        assert decoded.pubdate == "Mon, 04 Nov 2024 12:00:00 +0000"
        assert decoded.pubdate_unix == 1730721600
        assert decoded.score == 0.95
        assert decoded.site_domain == "example.com"

    def test_unknown_fields_ignored(self, article):
        article["extra"] = "ignored"
        result = RecommendationsResult.model_validate({"results": [article]})
        assert not hasattr(result.results[0], "extra")

    def test_missing_results_is_empty(self):
        assert RecommendationsResult.model_validate_json("{}").results == []

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            RecommendationsResult.model_validate_json('{"results": [{"score": "high"}]}')
