def get_db_models():
    """
    Dynamically import models to avoid circular imports.
    Returns list of SQLAlchemy models for registration or other purposes.
    """
    from models.criteria import Criteria, CriteriaField, CooperativeCategory, CooperativeScore, CriteriaFieldPoint
    from models.cooperative import Cooperative, CooperativeAccount, AdminAccount
    from models.member import Member, MemberAccount, Dependent
    from models.transaction import ShareTransaction, SavingTransaction
    from models.loan import Loan, Repayment
    from models.reward import Reward, GivenReward
    from models.session import Session

    return [
        Criteria,
        CriteriaField,
        CooperativeCategory,
        CooperativeScore,
        CriteriaFieldPoint,
        Cooperative,
        CooperativeAccount,
        AdminAccount,
        Member,
        MemberAccount,
        Dependent,
        ShareTransaction,
        SavingTransaction,
        Loan,
        Repayment,
        Reward,
        GivenReward,
        Session,
    ]
