"""
Address book package for the RandomUser API page.

This package contains:
- config: settings loaded from .env / environment
- errors: NetworkError and DecodeError
- models: UserRecord and UserBatch
- api_client: HTTP client for RandomUser API (UserSource)
- store: holds the most recently fetched batch (UserStore)
- document: the HTML document and its address-list container
- renderer: builds one list item per user (ListRenderer)
- revealer: appends a user's full data to its list item (DetailRevealer)
- page: orchestration of fetch-then-render (PageController)
- transformations: Pandas summary of a rendered batch
- io_utils: writing the rendered page to disk
- job: one-shot entry point (fetch, render, write, print summary)
"""
