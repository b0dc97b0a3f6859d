"""Fixed GraphQL documents for the Shopify Admin API.

Every list in these documents is capped at `RESULT_LIMIT`.
"""

from __future__ import annotations

RESULT_LIMIT = 5

PRODUCT_SEARCH_QUERY = """
query ProductSearch($queryString: String!) {
  products(first: 5, query: $queryString) {
    edges {
      node {
        id
        title
        description
        images(first: 1) {
          edges {
            node {
              url
              altText
            }
          }
        }
        priceRange {
          minVariantPrice {
            amount
            currencyCode
          }
        }
      }
    }
  }
}
""".strip()

CUSTOMER_ORDERS_QUERY = """
query CustomerOrders($email: String!) {
  customers(first: 1, query: $email) {
    edges {
      node {
        id
        firstName
        lastName
        email
        orders(first: 5) {
          edges {
            node {
              id
              name
              processedAt
              totalPriceSet {
                shopMoney {
                  amount
                  currencyCode
                }
              }
              fulfillments(first: 1) {
                status
                estimatedDeliveryAt
                trackingInfo(first: 5) {
                  company
                  number
                  url
                }
              }
              lineItems(first: 5) {
                edges {
                  node {
                    title
                    quantity
                  }
                }
              }
            }
          }
        }
      }
    }
  }
}
""".strip()

PRODUCT_LIST_QUERY = """
query ProductList {
  products(first: 5) {
    edges {
      node {
        id
        title
        description
        priceRange {
          minVariantPrice {
            amount
            currencyCode
          }
        }
      }
    }
  }
}
""".strip()
