"""Integration tests for the generic repository against SQLite."""

from sqlalchemy.ext.asyncio import AsyncSession

from bizhub.application.common.mapping import is_loaded
from bizhub.application.common.pagination import Pagination
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.infrastructure.common.repository import Repository
from bizhub.models import Affiliate, AffiliateImage, Image, Product
from tests.conftest import create_test_affiliate, create_test_product


class TestRepositoryReads:
    async def test_empty_predicate_returns_every_row(self, db_session: AsyncSession) -> None:
        for index in range(3):
            await create_test_affiliate(db_session, f"Affiliate {index}", index)
        repository = Repository(db_session, Affiliate)

        result = await repository.list_async(LambdaSpec(PredicateBuilder.new(True).build()))

        assert result.succeeded
        assert len(result.data) == 3

    async def test_false_predicate_returns_nothing(self, db_session: AsyncSession) -> None:
        await create_test_affiliate(db_session, "Only", 1)
        repository = Repository(db_session, Affiliate)

        result = await repository.list_async(LambdaSpec(PredicateBuilder.new(False).build()))

        assert result.data == []

    async def test_and_if_skips_missing_values(self, db_session: AsyncSession) -> None:
        await create_test_affiliate(db_session, "Alpha", 1)
        await create_test_affiliate(db_session, "Beta", 2)
        repository = Repository(db_session, Affiliate)

        predicate = (
            PredicateBuilder.new(True)
            .and_if(None, lambda title: Affiliate.title == title)
            .and_if("Beta", lambda title: Affiliate.title == title)
        )
        result = await repository.list_async(LambdaSpec(predicate.build()))

        assert [affiliate.title for affiliate in result.data] == ["Beta"]

    async def test_first_or_default_without_match_is_successful_none(
        self, db_session: AsyncSession
    ) -> None:
        repository = Repository(db_session, Affiliate)

        result = await repository.first_or_default_async(LambdaSpec(Affiliate.id == "missing"))

        assert result.succeeded
        assert result.data is None

    async def test_includes_are_loaded_eagerly(self, db_session: AsyncSession) -> None:
        affiliate = await create_test_affiliate(db_session, "With image", 1)
        image = Image(
            display_name="logo",
            file_name="logo.png",
            content_type="image/png",
            size=3,
            relative_path="ImageUploads/logo.png",
        )
        db_session.add(image)
        await db_session.flush()
        db_session.add(AffiliateImage(entity_id=affiliate.id, image_id=image.id))
        await db_session.commit()
        db_session.expunge_all()

        repository = Repository(db_session, Affiliate)
        result = await repository.first_or_default_async(
            LambdaSpec(
                Affiliate.id == affiliate.id,
                Include(Affiliate.images).then(AffiliateImage.image),
            )
        )

        assert result.data is not None
        assert is_loaded(result.data, "images")
        assert result.data.images[0].image.file_name == "logo.png"

    async def test_count_and_exists(self, db_session: AsyncSession) -> None:
        affiliate = await create_test_affiliate(db_session, "Counted", 1)
        repository = Repository(db_session, Affiliate)

        assert (await repository.count_async()).data == 1
        assert (await repository.exists_async(affiliate.id)).data is True
        assert (await repository.exists_async("missing")).data is False


class TestRepositoryPaging:
    async def test_page_holds_slice_and_total(self, db_session: AsyncSession) -> None:
        for name in ["Delta", "Alpha", "Charlie", "Bravo", "Echo"]:
            await create_test_product(db_session, name)
        repository = Repository(db_session, Product)

        page = await repository.paged_list_async(None, Pagination(page=2, page_size=2), "Name")

        assert page.succeeded
        assert [product.name for product in page.data] == ["Charlie", "Delta"]
        assert page.total_count == 5
        assert page.total_pages == 3

    async def test_page_beyond_last_is_empty(self, db_session: AsyncSession) -> None:
        await create_test_product(db_session, "Solo")
        repository = Repository(db_session, Product)

        page = await repository.paged_list_async(None, Pagination(page=5, page_size=10))

        assert page.data == []
        assert page.total_count == 1

    async def test_offset_beyond_integer_range_is_empty(self, db_session: AsyncSession) -> None:
        await create_test_product(db_session, "Solo")
        repository = Repository(db_session, Product)

        page = await repository.paged_list_async(None, Pagination(page=10**19, page_size=10))

        assert page.succeeded
        assert page.data == []
        assert page.total_count == 1
        assert page.has_next is False


class TestRepositoryWrites:
    async def test_create_is_staged_until_save(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Affiliate)

        await repository.create_async(Affiliate(title="Pending", display_order=1))
        saved = await repository.save_async()

        assert saved.succeeded
        assert (await repository.count_async()).data == 1

    async def test_created_row_carries_audit_defaults(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Affiliate)

        created = await repository.create_async(Affiliate(title="Audited", display_order=1))
        await repository.save_async()
        found = await repository.find_by_id_async(created.data.id)

        assert found.data.is_deleted is False
        assert found.data.active is True
        assert found.data.created_on is not None

    async def test_delete_missing_id_fails_and_leaves_rows(self, db_session: AsyncSession) -> None:
        await create_test_affiliate(db_session, "Keeper", 1)
        repository = Repository(db_session, Affiliate)

        result = await repository.delete_async("missing")
        await repository.save_async()

        assert not result.succeeded
        assert result.messages == ["Entity with ID missing not found."]
        assert (await repository.count_async()).data == 1

    async def test_delete_removes_row(self, db_session: AsyncSession) -> None:
        affiliate = await create_test_affiliate(db_session, "Gone", 1)
        repository = Repository(db_session, Affiliate)

        deleted = await repository.delete_async(affiliate.id)
        await repository.save_async()

        assert deleted.succeeded
        assert (await repository.exists_async(affiliate.id)).data is False

    async def test_constraint_violation_is_reported_not_raised(
        self, db_session: AsyncSession
    ) -> None:
        repository = Repository(db_session, AffiliateImage)

        await repository.create_async(AffiliateImage(entity_id="nope", image_id="nope"))
        saved = await repository.save_async()

        assert not saved.succeeded
        assert "FOREIGN KEY" in saved.messages[0]

    async def test_range_operations(self, db_session: AsyncSession) -> None:
        repository = Repository(db_session, Affiliate)

        created = await repository.create_range_async(
            [Affiliate(title=f"Bulk {index}", display_order=index) for index in range(3)]
        )
        await repository.save_async()
        removed = await repository.remove_range_async(created.unwrap()[:2])
        await repository.save_async()

        assert removed.succeeded
        remaining = await repository.list_async()
        assert [affiliate.title for affiliate in remaining.data] == ["Bulk 2"]
