from market.services.proposals.service import ProposalService

__all__ = ["ProposalService"]
