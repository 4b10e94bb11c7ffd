# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - llm/: Cloudflare Workers AI review synthesis
# - sinks/: webhook, Google Sheets and form recording sinks
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/application layers.
