"""Payload builders: construção de URLs para apps externos.

Estrutura:
- mail_clients/: deep links de composição (Spark, Airmail, myMail,
  Mail.Ru, Outlook)

Cada cliente é um descriptor; o algoritmo de build é único.
"""

__all__: list[str] = []
