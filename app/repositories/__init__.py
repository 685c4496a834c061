# Repositories package.
#
# ``user_repository`` defines the persistence contract the service layer
# depends on (``UserRepository``) and its SQLAlchemy implementation
# (``SqlAlchemyUserRepository``).  Implementations flush but never commit;
# the transaction boundary is owned by the ``get_db`` dependency.
