import threading


def test_parallel_signups_and_listing(app):
    results = []
    results_lock = threading.Lock()

    def worker(n):
        c = app.test_client()
        admin = app.test_client()
        admin.post('/api/login', json={'username': 'admin', 'password': 'adminpass'})
        for i in range(15):
            resp = c.post('/api/signup', json={'username': 'user-%d-%d' % (n, i), 'password': 'pw'})
            listing = admin.get('/api/uploads')
            with results_lock:
                results.append((resp.status_code, resp.get_json()))
                results.append((listing.status_code, listing.get_json()['ok']))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8 * 15 * 2
    assert all(status == 200 for status, _ in results), [r for r in results if r[0] != 200]

    c = app.test_client()
    for n in range(8):
        for i in range(15):
            resp = c.post('/api/login', json={'username': 'user-%d-%d' % (n, i), 'password': 'pw'})
            assert resp.status_code == 200


def test_stores_share_one_lock(app):
    creds = app.extensions['credential_store']
    sessions = app.extensions['session_store']
    assert creds._lock is sessions._lock
