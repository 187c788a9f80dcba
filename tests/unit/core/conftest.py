"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MDX = """\
import { Information } from '@/components/Information';
import DocImage from '@/components/DocImage';

# Getting Started

Set up the project in a few minutes.

<Information>Requires Node 18 or later.</Information>

<DocImage alt="Dashboard" src="/img/dashboard.png" />

```js
import foo from 'bar';
const x = {a: 1};
```

The current version is {version}.

export default ({ children }) => <Layout>{children}</Layout>
"""


@pytest.fixture(name="sample_mdx")
def sample_mdx_fixture():
    return SAMPLE_MDX
