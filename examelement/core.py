from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from examelement.application.billing.use_cases.apply_subscription_event_use_case import (
    ApplySubscriptionEventUseCase,
)
from examelement.application.billing.use_cases.start_checkout_use_case import StartCheckoutUseCase
from examelement.application.identity.use_cases.get_user_by_id_use_case import (
    GetUserByIdUseCase,
)
from examelement.application.progress.services.progress_ledger import ProgressLedger
from examelement.application.progress.use_cases.get_dashboard_use_case import (
    GetDashboardUseCase,
)
from examelement.application.study.services.content_store import ContentStore
from examelement.application.study.services.generated_content_parser import (
    GeneratedContentParser,
)
from examelement.application.study.use_cases.delete_content_use_case import DeleteContentUseCase
from examelement.application.study.use_cases.fetch_content_use_case import FetchContentUseCase
from examelement.application.study.use_cases.generate_content_use_case import (
    GenerateContentUseCase,
)
from examelement.application.study.use_cases.get_results_use_case import GetResultsUseCase
from examelement.application.study.use_cases.grade_answer_use_case import GradeAnswerUseCase
from examelement.application.study.use_cases.review_flashcard_use_case import (
    ReviewFlashcardUseCase,
)
from examelement.application.study.use_cases.submit_answers_use_case import (
    SubmitAnswersUseCase,
)
from examelement.application.usage.services.access_controller import AccessController
from examelement.application.usage.services.quota_gate import QuotaGate
from examelement.application.usage.use_cases.get_quota_status_use_case import (
    GetQuotaStatusUseCase,
)
from examelement.config import get_settings
from examelement.domain.progress.services.progress_aggregator import ProgressAggregator
from examelement.domain.study.services.scoring_engine import ScoringEngine
from examelement.domain.usage.services.quota_policy import QuotaPolicy
from examelement.infrastructure.ai.content_generator import AIContentGenerator
from examelement.infrastructure.billing.repositories.subscription_event_repository import (
    SubscriptionEventRepository,
)
from examelement.infrastructure.billing.stripe_gateway import StripePaymentGateway
from examelement.infrastructure.common.clock import SystemClock
from examelement.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from examelement.infrastructure.identity.repositories.user_repository import UserRepository
from examelement.infrastructure.progress.repositories.ledger_repository import LedgerRepository
from examelement.infrastructure.study.repositories.answer_record_repository import (
    AnswerRecordRepository,
)
from examelement.infrastructure.study.repositories.content_repository import ContentRepository
from examelement.infrastructure.study.repositories.flashcard_review_repository import (
    FlashcardReviewRepository,
)
from examelement.infrastructure.usage.repositories.quota_repository import QuotaRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    clock = providers.Singleton(SystemClock)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    quota_repository = providers.Factory(QuotaRepository, db=db)
    content_repository = providers.Factory(ContentRepository, db=db)
    answer_record_repository = providers.Factory(AnswerRecordRepository, db=db)
    flashcard_review_repository = providers.Factory(FlashcardReviewRepository, db=db)
    ledger_repository = providers.Factory(LedgerRepository, db=db)
    subscription_event_repository = providers.Factory(SubscriptionEventRepository, db=db)

    uow = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # External services
    content_generator = providers.Singleton(AIContentGenerator)
    payment_gateway = providers.Singleton(
        StripePaymentGateway,
        secret_key=settings.provided.STRIPE_SECRET_KEY,
        product_name=settings.provided.SUBSCRIPTION_PRODUCT_NAME,
        price_minor_units=settings.provided.SUBSCRIPTION_PRICE_MINOR_UNITS,
        currency=settings.provided.SUBSCRIPTION_CURRENCY,
        client_url=settings.provided.CLIENT_URL,
    )

    # Domain services
    scoring_engine = providers.Singleton(ScoringEngine)
    progress_aggregator = providers.Singleton(ProgressAggregator)
    quota_policy = providers.Singleton(
        QuotaPolicy.from_limits,
        flashcard=settings.provided.FREE_DAILY_FLASHCARD_LIMIT,
        quiz=settings.provided.FREE_DAILY_QUIZ_LIMIT,
        mock_exam=settings.provided.FREE_DAILY_MOCK_EXAM_LIMIT,
    )

    # Application services
    generated_content_parser = providers.Factory(GeneratedContentParser)
    quota_gate = providers.Factory(
        QuotaGate,
        quota_repository=quota_repository,
        policy=quota_policy,
        clock=clock,
        uow=uow,
    )
    access_controller = providers.Factory(
        AccessController,
        user_repository=user_repository,
        quota_gate=quota_gate,
    )
    content_store = providers.Factory(
        ContentStore,
        content_repository=content_repository,
        answer_record_repository=answer_record_repository,
        flashcard_review_repository=flashcard_review_repository,
        scoring_engine=scoring_engine,
        clock=clock,
    )
    progress_ledger = providers.Factory(
        ProgressLedger,
        ledger_repository=ledger_repository,
        clock=clock,
    )

    # Use cases
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )
    generate_content_use_case = providers.Factory(
        GenerateContentUseCase,
        access_controller=access_controller,
        content_generator=content_generator,
        parser=generated_content_parser,
        content_store=content_store,
        progress_ledger=progress_ledger,
        uow=uow,
        timeout_seconds=settings.provided.GENERATOR_TIMEOUT_SECONDS,
        max_attempts=settings.provided.GENERATOR_MAX_ATTEMPTS,
        max_count=settings.provided.MAX_GENERATION_COUNT,
    )
    fetch_content_use_case = providers.Factory(
        FetchContentUseCase,
        content_store=content_store,
    )
    submit_answers_use_case = providers.Factory(
        SubmitAnswersUseCase,
        content_store=content_store,
        progress_ledger=progress_ledger,
        uow=uow,
    )
    get_results_use_case = providers.Factory(
        GetResultsUseCase,
        content_store=content_store,
    )
    grade_answer_use_case = providers.Factory(
        GradeAnswerUseCase,
        content_store=content_store,
        progress_ledger=progress_ledger,
        uow=uow,
        grader_ids=settings.provided.GRADER_USER_IDS,
    )
    review_flashcard_use_case = providers.Factory(
        ReviewFlashcardUseCase,
        content_store=content_store,
        uow=uow,
    )
    delete_content_use_case = providers.Factory(
        DeleteContentUseCase,
        content_store=content_store,
        uow=uow,
    )
    get_dashboard_use_case = providers.Factory(
        GetDashboardUseCase,
        progress_ledger=progress_ledger,
        aggregator=progress_aggregator,
        clock=clock,
        weak_topic_threshold=settings.provided.WEAK_TOPIC_THRESHOLD,
    )
    get_quota_status_use_case = providers.Factory(
        GetQuotaStatusUseCase,
        user_repository=user_repository,
        quota_gate=quota_gate,
    )
    apply_subscription_event_use_case = providers.Factory(
        ApplySubscriptionEventUseCase,
        user_repository=user_repository,
        event_repository=subscription_event_repository,
        clock=clock,
        uow=uow,
    )
    start_checkout_use_case = providers.Factory(
        StartCheckoutUseCase,
        user_repository=user_repository,
        payment_gateway=payment_gateway,
        uow=uow,
    )


# Global container instance
container = Container()
