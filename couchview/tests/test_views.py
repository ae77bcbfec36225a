# -*- coding: utf-8 -*-

import unittest

from couchview import exceptions, views


class ViewQueryTestCase(unittest.TestCase):

    def test_defaults(self):
        query = views.ViewQuery('people', 'by_type')
        self.assertIsNone(query.map_def)
        self.assertIsNone(query.reduce_def)
        self.assertIsNone(query.startkey)
        self.assertIsNone(query.endkey)
        self.assertFalse(query.include_docs)
        self.assertEqual(query.params(), {})

    def test_path(self):
        query = views.ViewQuery('people', 'by_type')
        self.assertEqual(query.path_segments, ['_design', 'people', '_view', 'by_type'])
        self.assertEqual(query.design_id, '_design/people')

    def test_params(self):
        query = views.ViewQuery('people', 'by_type', startkey=['a'], endkey=['a', {}],
                                key='x', limit=10, skip=2, descending=True)
        self.assertEqual(query.params(), {
            'startkey': '["a"]',
            'endkey': '["a", {}]',
            'key': '"x"',
            'limit': '10',
            'skip': '2',
            'descending': 'true',
        })

    def test_non_ascii_key(self):
        query = views.ViewQuery('people', 'by_name', startkey=u'Zoë')
        self.assertEqual(query.params(), {'startkey': u'"Zoë"'})

    def test_design_doc(self):
        query = views.ViewQuery('people', 'by_type', map_def='function(doc) {}')
        self.assertEqual(query.design_doc(), {
            '_id': '_design/people',
            'views': {'by_type': {'map': 'function(doc) {}'}},
        })

    def test_design_doc_with_reduce(self):
        query = views.ViewQuery('people', 'by_type', map_def='function(doc) {}',
                                reduce_def='_sum')
        self.assertEqual(query.design_doc()['views']['by_type']['reduce'], '_sum')

    def test_immutable(self):
        query = views.ViewQuery('people', 'by_type')
        self.assertRaises(AttributeError, setattr, query, 'startkey', 1)
        self.assertEqual(query._replace(startkey=1).startkey, 1)
        self.assertIsNone(query.startkey)


class RowTestCase(unittest.TestCase):

    def test_from_json(self):
        row = views.Row.from_json({'id': 'a', 'key': [1, 2], 'value': {'x': 1}})
        self.assertEqual(row, views.Row('a', [1, 2], {'x': 1}, None))

    def test_reduced_row_has_no_id(self):
        row = views.Row.from_json({'key': None, 'value': 12})
        self.assertIsNone(row.id)
        self.assertEqual(row.value, 12)

    def test_not_an_object(self):
        self.assertRaises(exceptions.CodecError, views.Row.from_json, ['a'])


class DecodeResultTestCase(unittest.TestCase):

    def test_order_is_preserved(self):
        data = {'total_rows': 3, 'offset': 1, 'rows': [
            {'id': 'z', 'key': 1, 'value': None},
            {'id': 'a', 'key': 1, 'value': None},
        ]}
        result = views.decode_result(data)
        self.assertEqual([row.id for row in result], ['z', 'a'])
        self.assertEqual(len(result), 2)
        self.assertEqual(result.json(), {'total_rows': 3, 'offset': 1})
        self.assertEqual(repr(result), '<ViewResult offset=1 total_rows=3 rows=2>')

    def test_reduce_envelope(self):
        result = views.decode_result({'rows': [{'key': None, 'value': 5}]})
        self.assertIsNone(result.offset)
        self.assertIsNone(result.total_rows)
        self.assertEqual(result[0].value, 5)

    def test_bad_row_leaves_buffer_untouched(self):
        rows = []
        data = {'rows': [{'id': 'a', 'key': 1, 'value': None}, 'junk']}
        self.assertRaises(exceptions.CodecError, views.decode_result, data, rows)
        self.assertEqual(rows, [])

    def test_boolean_offset(self):
        self.assertRaises(exceptions.CodecError, views.decode_result, {'rows': [], 'offset': True})


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(ViewQueryTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(RowTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(DecodeResultTestCase))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
