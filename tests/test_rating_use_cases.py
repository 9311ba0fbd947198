import pytest
from quiz_engine.app.use_cases.ratings.rating_use_cases import RatingUseCases
from quiz_engine.infrastructure.repositories.rating.memory_repo import MemoryRatingRepo


@pytest.fixture
def ratings():
    return RatingUseCases(MemoryRatingRepo())


@pytest.mark.asyncio
async def test_unknown_account_has_rating_zero(ratings):
    assert await ratings.get('nobody') == 0


@pytest.mark.asyncio
@pytest.mark.parametrize('score', range(6))
async def test_first_score_becomes_the_rating(ratings, score):
    assert await ratings.update('bob', score) == score
    assert await ratings.get('bob') == score


@pytest.mark.asyncio
async def test_later_scores_blend_five_to_one(ratings):
    await ratings.update('bob', 3)
    # (3 * 5 + 5) // 6 == 3
    assert await ratings.update('bob', 5) == 3
    # (3 * 5 + 0) // 6 == 2
    assert await ratings.update('bob', 0) == 2


@pytest.mark.asyncio
async def test_explicit_prior_overrides_stored_rating(ratings):
    await ratings.update('bob', 1)
    assert await ratings.update('bob', 4, prior=4) == 4
    assert await ratings.get('bob') == 4


@pytest.mark.asyncio
async def test_zero_score_keeps_unrated_account_at_zero(ratings):
    assert await ratings.update('bob', 0) == 0
    # Still treated as unrated, so the next score is taken as is
    assert await ratings.update('bob', 4) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize('score', [-1, 6])
async def test_score_out_of_range_is_rejected(ratings, score):
    with pytest.raises(ValueError):
        await ratings.update('bob', score)
    assert await ratings.get('bob') == 0
