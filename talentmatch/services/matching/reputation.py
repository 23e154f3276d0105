from talentmatch.services.matching.base import FactorScore

MAX_RATING = 5.0
# Zero reviews is neither penalized nor rewarded
NEUTRAL_SCORE = 0.5


def score_reputation(rating: float | None, review_count: int) -> FactorScore:
    if review_count == 0:
        return FactorScore(score=NEUTRAL_SCORE, detail="No reviews yet.")
    if rating is None:
        return FactorScore(score=None, detail=f"{review_count} reviews but no aggregate rating.")

    noun = "review" if review_count == 1 else "reviews"
    return FactorScore(
        score=rating / MAX_RATING,
        detail=f"Rated {rating:g}/5 across {review_count} {noun}.",
    )
