"""
Uniqueness smoke check for slug generators.

Generates a batch of slugs and reports duplicates and slugs whose length
differs from the request. Nothing is printed and the process is never
exited; callers decide what to do with the report.
"""
from slugger.config import settings
from slugger.logging_config import setup_logging
from slugger.schemas.slug import UniquenessReport
from slugger.services.slug import SlugGenerator, SlugPolicy

logger = setup_logging()

SAMPLE_SIZE = 10


def check_uniqueness(
    iterations: int | None = None,
    length: int | None = None,
    policy: SlugPolicy = SlugPolicy.OBSCURED,
    generator: SlugGenerator | None = None,
) -> UniquenessReport:
    """
    Generate `iterations` slugs and check them for duplicates and length.

    Args:
        iterations: Number of slugs to generate (default: UNIQUENESS_ITERATIONS)
        length: Requested slug length (default: UNIQUENESS_LENGTH)
        policy: Policy to exercise (default: OBSCURED)
        generator: Optional generator. If not provided, a new SlugGenerator
            with the system entropy source is used.

    Returns:
        UniquenessReport with the first SAMPLE_SIZE unique slugs as samples
    """
    if iterations is None:
        iterations = settings.UNIQUENESS_ITERATIONS
    if length is None:
        length = settings.UNIQUENESS_LENGTH
    if generator is None:
        generator = SlugGenerator()

    logger.info(
        f"Running uniqueness check: policy={SlugPolicy(policy).value}, "
        f"iterations={iterations}, length={length}"
    )

    seen: set[str] = set()
    samples: list[str] = []
    duplicates: list[str] = []
    wrong_length: list[str] = []

    for _ in range(iterations):
        slug = generator.generate(length, policy)

        if len(slug) != length:
            wrong_length.append(slug)

        if slug in seen:
            duplicates.append(slug)
            continue

        seen.add(slug)
        if len(samples) < SAMPLE_SIZE:
            samples.append(slug)

    report = UniquenessReport(
        policy=policy,
        iterations=iterations,
        length=length,
        unique_count=len(seen),
        duplicates=duplicates,
        wrong_length=wrong_length,
        samples=samples,
    )

    if report.passed:
        logger.info(f"All {iterations} slugs are unique and valid")
    else:
        logger.error(
            f"Uniqueness check failed: {len(duplicates)} duplicates "
            f"(first: {duplicates[:SAMPLE_SIZE]}), {len(wrong_length)} with wrong length "
            f"(first: {wrong_length[:SAMPLE_SIZE]})"
        )

    return report
