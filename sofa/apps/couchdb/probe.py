from collections import namedtuple

from sofa.utils.httpurl import HEAD, header_unquote

from .errors import StatusFailure, DatabaseError


__all__ = ['Existence', 'ExistenceProbe', 'etag_revision']


Existence = namedtuple('Existence', 'exists revision')


def etag_revision(etag):
    '''The revision token of an entity tag, surrounding quotes stripped'''
    if etag:
        return header_unquote(etag)


class ExistenceProbe:
    '''Check the existence of a document with a ``HEAD`` request.

    The revision of an existing document is obtained from the ``ETag``
    header, the document body is not transferred.
    '''
    def __init__(self, executor):
        self.executor = executor

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.executor)

    def __call__(self, id=None):
        return self.probe(id)

    async def probe(self, id=None):
        '''Probe the document at ``id``, the database when ``id`` is empty.

        :return: an :class:`Existence` named tuple. A 404 response is not an
            error, it returns ``Existence(False, None)``.
        '''
        try:
            outcome = await self.executor.execute(HEAD, id)
        except (StatusFailure, DatabaseError) as exc:
            if exc.status_code == 404:
                return Existence(False, None)
            raise
        return Existence(outcome.status_code == 200,
                         etag_revision(outcome.etag))
