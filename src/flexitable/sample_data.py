"""Generate synthetic index input for demos and smoke runs."""

from typing import List
import numpy as np
from faker import Faker

from .models import Document, PageTags, Tag

TAG_GROUPS = [
    "invoiceHeader", "invoice_lines", "customerInfo_v2", "paymentTerms",
    "shippingAddress", "tax_summary", "signatureBlock", "lineItem42",
]
TAG_TYPES = ["textField", "date_field", "amount", "checkbox", "tableCell", "barcode128"]
STATUSES = ["OK", "MISSING", "REVIEW", "rejected"]


def generate_tag(page: int, rng: np.random.Generator, fake: Faker) -> Tag:
    """One tag with identifier-like names and an occasional URL."""
    group = str(rng.choice(TAG_GROUPS))
    tag_type = str(rng.choice(TAG_TYPES))

    comment = fake.sentence(nb_words=int(rng.integers(2, 8))) if rng.random() > 0.3 else None

    if rng.random() < 0.2:
        comment_info = fake.url() + fake.uri_path()
    elif rng.random() < 0.5:
        comment_info = f"{fake.word()}_{fake.word()}{int(rng.integers(1, 999))}{fake.word().capitalize()}"
    else:
        comment_info = ""

    return Tag(
        groups=group,
        type=tag_type,
        page=page,
        status=str(rng.choice(STATUSES)),
        comment=comment,
        comment_info=comment_info,
    )


def generate_document(
    rng: np.random.Generator,
    fake: Faker,
    num_pages: int = 5,
    num_tags: int = 40,
) -> Document:
    """
    Generate a document whose tags are spread over num_pages pages.

    Args:
        rng: Random number generator
        fake: Seeded Faker instance
        num_pages: Number of source pages to spread tags across
        num_tags: Total number of tags

    Returns:
        Document ready to be drawn as an index page
    """
    num_pages = max(num_pages, 1)
    info = {
        "Title": fake.catch_phrase(),
        "Author": fake.name(),
        "Company": fake.company(),
        "Producer": f"scanEngine_{int(rng.integers(1, 9))}.{int(rng.integers(0, 20))}",
        "CreationDate": fake.date_time_this_year().isoformat(),
        "Source": fake.url(),
        "PageCount": str(num_pages),
    }

    pages: List[PageTags] = [PageTags() for _ in range(num_pages)]
    for _ in range(num_tags):
        page = int(rng.integers(1, num_pages + 1))
        pages[page - 1].tags.append(generate_tag(page, rng, fake))

    return Document(document_info=info, page_tags=pages)


def demo_document(seed: int = 42, num_tags: int = 40) -> Document:
    """Seeded convenience wrapper around generate_document."""
    rng = np.random.default_rng(seed)
    fake = Faker()
    fake.seed_instance(seed)
    return generate_document(rng, fake, num_tags=num_tags)
