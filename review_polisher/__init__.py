# Review Polisher - Restaurant Review Polishing Service
# =====================================================
# Turns review tags into a polished review and records every submission
# to best-effort external sinks. Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI router (web/)
# - Application:    Fan-out coordination of background sink deliveries
# - Domain:         Pure business logic (submission, label taxonomy, errors)
# - Infrastructure: External services (AI inference, webhooks, Sheets, forms)
#
# Sinks and the synthesis backend can be swapped without touching the
# domain or application layers.
