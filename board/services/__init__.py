# Services package.
#
#   post_service : transactional CRUD + pagination for Post
#
# Services receive their repository and AsyncSession through the
# constructor and own the transaction boundary of every public method.
