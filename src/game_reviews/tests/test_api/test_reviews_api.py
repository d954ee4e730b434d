import pytest

from game_reviews.exceptions.base import (
    CATEGORY_NOT_FOUND_MESSAGE,
    INVALID_ORDER_MESSAGE,
    INVALID_SORT_BY_MESSAGE,
    MISSING_VOTE_INCREMENT_MESSAGE,
    RESOURCE_NOT_FOUND_MESSAGE,
    REVIEW_NOT_FOUND_MESSAGE,
    TYPE_MISMATCH_MESSAGE,
)

from ..test_fixtures.seed_data import (
    CATEGORY_WITHOUT_REVIEWS,
    MISSING_ID,
    REVIEW_WITH_COMMENTS,
    REVIEWS,
    comment_count,
)

REVIEW_KEYS = {
    "review_id",
    "title",
    "review_body",
    "designer",
    "review_img_url",
    "votes",
    "category",
    "owner",
    "created_at",
}


@pytest.mark.asyncio
class TestGetReviews:

    async def test_default_listing(self, client):
        response = await client.get("/api/reviews")

        assert response.status_code == 200
        reviews = response.json()["reviews"]
        assert len(reviews) == len(REVIEWS)
        for review in reviews:
            assert set(review) == REVIEW_KEYS | {"comment_count"}
        # ISO strings in one format sort chronologically
        created = [r["created_at"] for r in reviews]
        assert created == sorted(created, reverse=True)

    async def test_timestamps_are_utc_iso(self, client):
        response = await client.get("/api/reviews/1")
        assert response.json()["review"]["created_at"] == "2021-01-18T10:00:20.000Z"

    async def test_category_filter_with_spaces(self, client):
        response = await client.get("/api/reviews", params={"category": "social deduction"})

        assert response.status_code == 200
        categories = {r["category"] for r in response.json()["reviews"]}
        assert categories == {"social deduction"}

    async def test_category_without_reviews(self, client):
        response = await client.get("/api/reviews", params={"category": CATEGORY_WITHOUT_REVIEWS})
        assert response.status_code == 200
        assert response.json() == {"reviews": []}

    async def test_unknown_category(self, client):
        response = await client.get("/api/reviews", params={"category": "monopoly"})
        assert response.status_code == 404
        assert response.json() == {"message": CATEGORY_NOT_FOUND_MESSAGE}

    async def test_injection_attempt_in_category_is_just_a_value(self, client):
        response = await client.get("/api/reviews", params={"category": "x'; DROP TABLE reviews; --"})
        assert response.status_code == 404

        still_there = await client.get("/api/reviews")
        assert len(still_there.json()["reviews"]) == len(REVIEWS)

    @pytest.mark.parametrize(
        "params, expected_titles",
        [
            ({"sort_by": "title"}, sorted(r["title"] for r in REVIEWS)),
            ({"sort_by": "title", "order": "desc"}, sorted((r["title"] for r in REVIEWS), reverse=True)),
        ],
    )
    async def test_sort_by_title(self, client, params, expected_titles):
        response = await client.get("/api/reviews", params=params)
        assert [r["title"] for r in response.json()["reviews"]] == expected_titles

    async def test_order_without_sort_by_applies_to_created_at(self, client):
        response = await client.get("/api/reviews", params={"order": "asc"})
        created = [r["created_at"] for r in response.json()["reviews"]]
        assert created == sorted(created)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"sort_by": "price"}, INVALID_SORT_BY_MESSAGE),
            ({"sort_by": "title; DROP TABLE reviews"}, INVALID_SORT_BY_MESSAGE),
            ({"order": "DESC"}, INVALID_ORDER_MESSAGE),
            ({"sort_by": "price", "order": "up"}, INVALID_SORT_BY_MESSAGE),
        ],
    )
    async def test_invalid_query_parameters(self, client, params, message):
        response = await client.get("/api/reviews", params=params)
        assert response.status_code == 400
        assert response.json() == {"message": message}


@pytest.mark.asyncio
class TestGetReviewById:

    async def test_found(self, client):
        response = await client.get(f"/api/reviews/{REVIEW_WITH_COMMENTS}")

        assert response.status_code == 200
        review = response.json()["review"]
        assert review["review_id"] == REVIEW_WITH_COMMENTS
        assert review["comment_count"] == comment_count(REVIEW_WITH_COMMENTS)

    async def test_missing(self, client):
        response = await client.get(f"/api/reviews/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == {"message": REVIEW_NOT_FOUND_MESSAGE}

    @pytest.mark.parametrize("review_id", ["abc", "1.5", "99999999999", "٣"])
    async def test_non_integer_id(self, client, review_id):
        response = await client.get(f"/api/reviews/{review_id}")
        assert response.status_code == 400
        assert response.json() == {"message": TYPE_MISMATCH_MESSAGE}


@pytest.mark.asyncio
class TestPatchReview:

    async def test_increment(self, client):
        response = await client.patch("/api/reviews/1", json={"inc_votes": 3})

        assert response.status_code == 200
        updated = response.json()["updatedReview"]
        assert updated["votes"] == REVIEWS[0]["votes"] + 3
        assert set(updated) == REVIEW_KEYS

        # persisted
        again = await client.get("/api/reviews/1")
        assert again.json()["review"]["votes"] == updated["votes"]

    async def test_decrement_below_zero(self, client):
        response = await client.patch("/api/reviews/1", json={"inc_votes": -100})
        assert response.json()["updatedReview"]["votes"] == REVIEWS[0]["votes"] - 100

    @pytest.mark.parametrize("body", [{}, {"votes": 1}, {"inc_votes": None}])
    async def test_missing_increment(self, client, body):
        response = await client.patch("/api/reviews/1", json=body)
        assert response.status_code == 400
        assert response.json() == {"message": MISSING_VOTE_INCREMENT_MESSAGE}

    async def test_no_body(self, client):
        response = await client.patch("/api/reviews/1")
        assert response.status_code == 400
        assert response.json() == {"message": MISSING_VOTE_INCREMENT_MESSAGE}

    async def test_missing_review(self, client):
        response = await client.patch(f"/api/reviews/{MISSING_ID}", json={"inc_votes": 1})
        assert response.status_code == 404
        assert response.json() == {"message": RESOURCE_NOT_FOUND_MESSAGE}

    async def test_non_integer_id(self, client):
        response = await client.patch("/api/reviews/abc", json={"inc_votes": 1})
        assert response.status_code == 400
        assert response.json() == {"message": TYPE_MISMATCH_MESSAGE}

    @pytest.mark.postgres_only
    async def test_non_integer_increment_rejected_by_storage(self, client):
        response = await client.patch("/api/reviews/1", json={"inc_votes": "abc"})
        assert response.status_code == 400
        assert response.json() == {"message": TYPE_MISMATCH_MESSAGE}

    @pytest.mark.parametrize("inc_votes", [1.5, -0.25])
    async def test_fractional_increment_is_type_mismatch(self, client, inc_votes):
        response = await client.patch("/api/reviews/1", json={"inc_votes": inc_votes})
        assert response.status_code == 400
        assert response.json() == {"message": TYPE_MISMATCH_MESSAGE}

        # nothing was stored; the review still reads back cleanly
        again = await client.get("/api/reviews/1")
        assert again.status_code == 200
        assert again.json()["review"]["votes"] == REVIEWS[0]["votes"]

    @pytest.mark.parametrize("inc_votes", [True, False])
    async def test_boolean_increment_is_type_mismatch(self, client, inc_votes):
        response = await client.patch("/api/reviews/1", json={"inc_votes": inc_votes})
        assert response.status_code == 400
        assert response.json() == {"message": TYPE_MISMATCH_MESSAGE}

        again = await client.get("/api/reviews/1")
        assert again.json()["review"]["votes"] == REVIEWS[0]["votes"]
