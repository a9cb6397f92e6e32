"""Shared pytest fixtures for the code generator tests."""

import pytest

SAMPLE_PAGE = """
<html>
<body>
<h1>Webhook event names</h1>
<h2 style="position: relative">
  <a href="#authorized-and-captured-payments" class="anchor before">
    <svg viewBox="0 0 16 16" width="16"></svg>
  </a>
  <div class="hidden-anchor" id="authorized-and-captured-payments"></div>
  Authorized and captured payments
</h2>
<p>
  The webhooks for authorizing and capturing payments correspond to both
  supported versions of the Payments API:
</p>
<h3 style="position: relative">
  <a href="#v2" aria-label="v2 permalink" class="anchor before">
    <svg aria-hidden="true" width="16"></svg>
  </a>
  <div class="hidden-anchor" id="v2"></div>
  V2
</h3>
<table>
  <thead>
    <tr><th>Event</th><th>Trigger</th><th>Related method</th></tr>
  </thead>
  <tbody>
    <tr>
      <td>
        <code class="language-text">PAYMENT.AUTHORIZATION.VOIDED</code>
      </td>
      <td>
        A payment authorization is voided.
      </td>
      <td>
        <a href="/docs/api/payments/v2/#authorizations_get">
          Show details for authorized payment
        </a>
        with response
        <code class="language-text">status</code> of
        <code class="language-text">voided</code>.
      </td>
    </tr>
  </tbody>
</table>
<h3 style="position: relative">
  <a href="#v1" aria-label="v1 permalink" class="anchor before">
    <svg aria-hidden="true" width="16"></svg>
  </a>
  <div class="hidden-anchor" id="v1"></div>
  V1
</h3>
<table>
  <tbody>
    <tr>
      <td><code class="language-text">PAYMENT.AUTHORIZATION.VOIDED</code></td>
      <td>
        See
        <a href="#payment-authorization-voided">
          <code class="language-text">PAYMENT.AUTHORIZATION.VOIDED</code>
        </a>.
      </td>
      <td></td>
    </tr>
    <tr>
      <td><code class="language-text">PAYMENT.SALE.COMPLETED</code></td>
      <td>A sale completes.</td>
      <td></td>
    </tr>
  </tbody>
</table>
<h2 style="position: relative">
  <a href="#subscriptions" class="anchor before">
    <svg viewBox="0 0 16 16" width="16"></svg>
  </a>
  <div class="hidden-anchor" id="subscriptions"></div>
  Subscriptions
</h2>
<h3 style="position: relative">
  <a href="#v2-1" class="anchor before"></a>
  <div class="hidden-anchor" id="v2-1"></div>
  V2
</h3>
<table>
  <tbody>
    <tr>
      <td><code class="language-text">BILLING.SUBSCRIPTION.CREATED</code></td>
      <td>A billing subscription is created.</td>
      <td>
        <a href="/docs/api/subscriptions/v1/#subscriptions_create">Create subscription</a>
      </td>
    </tr>
  </tbody>
</table>
<table>
  <tbody>
    <tr>
      <td><code class="language-text">PAYMENT.SALE.COMPLETED</code></td>
      <td>A payment is made on a subscription.</td>
      <td></td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""


@pytest.fixture
def sample_page() -> bytes:
    """Two-group event-names page.

    The first group has a description and two versions, the second has no
    description, one version and an unversioned table. ``PAYMENT.SALE.COMPLETED``
    appears in both groups and the V1 ``PAYMENT.AUTHORIZATION.VOIDED`` row is a
    reference to the V2 one.

    Returns:
        Raw page bytes.
    """
    return SAMPLE_PAGE.encode("utf-8")
