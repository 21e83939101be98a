"""Service layer — adapts domain results into ServiceResult envelopes."""
