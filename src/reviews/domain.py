"""Reviews bounded context — product reviews, spam scoring and moderation.

Handles the review lifecycle (submission, moderation, helpfulness voting,
removal), rating statistics, and moderator/customer notices. Integrates
with the Ordering domain to learn which customers received which products.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

reviews = Domain(name="reviews")
