# Services package.
#
#   user_service  — CRUD for User, with a find-or-fail contract
#
# Services receive their repository at construction time so the router
# layer (via ``app.dependencies``) decides which store backs a request and
# tests can substitute a double without touching service logic.
