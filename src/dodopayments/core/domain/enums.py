"""Enumerations shared across resources.

All of them derive from `ApiEnum`, so a value introduced by the API after
this release parses as a pseudo-member instead of failing validation.
"""

from __future__ import annotations

from dodopayments.core.domain.base import ApiEnum

_CURRENCY_CODES = """
AED ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB BRL
BSD BWP BYN BZD CAD CHF CLP CNY COP CRC CUP CVE CZK DJF DKK DOP DZD EGP ETB
EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD HNL HRK HTG HUF IDR ILS INR
IQD JMD JOD JPY KES KGS KHR KMF KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD
MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN MYR MZN NAD NGN NIO NOK NPR NZD
OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD RUB RWF SAR SBD SCR SEK SGD SHP
SLE SLL SOS SRD SSP STN SVC SZL THB TND TOP TRY TTD TWD TZS UAH UGX USD UYU
UZS VES VND VUV WST XAF XCD XOF XPF YER ZAR ZMW
"""

_COUNTRY_CODES = """
AF AX AL DZ AS AD AO AI AQ AG AR AM AW AU AT AZ BS BH BD BB BY BE BZ BJ BM
BT BO BQ BA BW BV BR IO BN BG BF BI KH CM CA CV KY CF TD CL CN CX CC CO KM
CG CD CK CR CI HR CU CW CY CZ DK DJ DM DO EC EG SV GQ ER EE ET FK FO FJ FI
FR GF PF TF GA GM GE DE GH GI GR GL GD GP GU GT GG GN GW GY HT HM VA HN HK
HU IS IN ID IR IQ IE IM IL IT JM JP JE JO KZ KE KI KP KR KW KG LA LV LB LS
LR LY LI LT LU MO MK MG MW MY MV ML MT MH MQ MR MU YT MX FM MD MC MN ME MS
MA MZ MM NA NR NP NL NC NZ NI NE NG NU NF MP NO OM PK PW PS PA PG PY PE PH
PN PL PT PR QA RE RO RU RW BL SH KN LC MF PM VC WS SM ST SA SN RS SC SL SG
SX SK SI SB SO ZA GS SS ES LK SD SR SJ SZ SE CH SY TW TJ TZ TH TL TG TK TO
TT TN TR TM TC TV UG UA AE GB UM US UY UZ VU VE VN VG VI WF EH YE ZM ZW
"""

# ISO 4217 codes accepted for prices and settlements.
Currency = ApiEnum(  # type: ignore[misc]
    "Currency",
    [(code, code) for code in _CURRENCY_CODES.split()],
    module=__name__,
    qualname="Currency",
)

# ISO 3166-1 alpha-2 codes.
CountryCode = ApiEnum(  # type: ignore[misc]
    "CountryCode",
    [(code, code) for code in _COUNTRY_CODES.split()],
    module=__name__,
    qualname="CountryCode",
)


class TaxCategory(ApiEnum):
    DIGITAL_PRODUCTS = "digital_products"
    SAAS = "saas"
    E_BOOK = "e_book"
    EDTECH = "edtech"


class TimeInterval(ApiEnum):
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"


class IntentStatus(ApiEnum):
    """Lifecycle state of a payment intent."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    PROCESSING = "processing"
    REQUIRES_CUSTOMER_ACTION = "requires_customer_action"
    REQUIRES_MERCHANT_ACTION = "requires_merchant_action"
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_CAPTURE = "requires_capture"
    PARTIALLY_CAPTURED = "partially_captured"
    PARTIALLY_CAPTURED_AND_CAPTURABLE = "partially_captured_and_capturable"


class SubscriptionStatus(ApiEnum):
    PENDING = "pending"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"
    FAILED = "failed"
    EXPIRED = "expired"


class RefundStatus(ApiEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PENDING = "pending"
    REVIEW = "review"


class DisputeStage(ApiEnum):
    PRE_DISPUTE = "pre_dispute"
    DISPUTE = "dispute"
    PRE_ARBITRATION = "pre_arbitration"


class DisputeStatus(ApiEnum):
    DISPUTE_OPENED = "dispute_opened"
    DISPUTE_EXPIRED = "dispute_expired"
    DISPUTE_ACCEPTED = "dispute_accepted"
    DISPUTE_CANCELLED = "dispute_cancelled"
    DISPUTE_CHALLENGED = "dispute_challenged"
    DISPUTE_WON = "dispute_won"
    DISPUTE_LOST = "dispute_lost"


class LicenseKeyStatus(ApiEnum):
    ACTIVE = "active"
    EXPIRED = "expired"
    DISABLED = "disabled"


class PayoutStatus(ApiEnum):
    NOT_INITIATED = "not_initiated"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    FAILED = "failed"
    SUCCESS = "success"


class DiscountType(ApiEnum):
    PERCENTAGE = "percentage"


class ProrationBillingMode(ApiEnum):
    PRORATED_IMMEDIATELY = "prorated_immediately"
    FULL_IMMEDIATELY = "full_immediately"
    DIFFERENCE_IMMEDIATELY = "difference_immediately"


class PaymentMethodTypes(ApiEnum):
    """Payment methods a checkout can be restricted to."""

    ACH = "ach"
    AFFIRM = "affirm"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALFAMART = "alfamart"
    ALI_PAY = "ali_pay"
    ALI_PAY_HK = "ali_pay_hk"
    ALMA = "alma"
    AMAZON_PAY = "amazon_pay"
    APPLE_PAY = "apple_pay"
    ATOME = "atome"
    BACS = "bacs"
    BANCONTACT_CARD = "bancontact_card"
    BECS = "becs"
    BENEFIT = "benefit"
    BIZUM = "bizum"
    BLIK = "blik"
    BOLETO = "boleto"
    BCA_BANK_TRANSFER = "bca_bank_transfer"
    BNI_VA = "bni_va"
    BRI_VA = "bri_va"
    CARD_REDIRECT = "card_redirect"
    CIMB_VA = "cimb_va"
    CLASSIC = "classic"
    CREDIT = "credit"
    CRYPTO_CURRENCY = "crypto_currency"
    CASHAPP = "cashapp"
    DANA = "dana"
    DANAMON_VA = "danamon_va"
    DEBIT = "debit"
    DUIT_NOW = "duit_now"
    EFECTY = "efecty"
    EFT = "eft"
    EPS = "eps"
    FPS = "fps"
    EVOUCHER = "evoucher"
    GIROPAY = "giropay"
    GIVEX = "givex"
    GOOGLE_PAY = "google_pay"
    GO_PAY = "go_pay"
    GCASH = "gcash"
    IDEAL = "ideal"
    INTERAC = "interac"
    INDOMARET = "indomaret"
    KLARNA = "klarna"
    KAKAO_PAY = "kakao_pay"
    LOCAL_BANK_REDIRECT = "local_bank_redirect"
    MANDIRI_VA = "mandiri_va"
    KNET = "knet"
    MB_WAY = "mb_way"
    MOBILE_PAY = "mobile_pay"
    MOMO = "momo"
    MOMO_ATM = "momo_atm"
    MULTIBANCO = "multibanco"
    ONLINE_BANKING_THAILAND = "online_banking_thailand"
    ONLINE_BANKING_CZECH_REPUBLIC = "online_banking_czech_republic"
    ONLINE_BANKING_FINLAND = "online_banking_finland"
    ONLINE_BANKING_FPX = "online_banking_fpx"
    ONLINE_BANKING_POLAND = "online_banking_poland"
    ONLINE_BANKING_SLOVAKIA = "online_banking_slovakia"
    OXXO = "oxxo"
    PAGO_EFECTIVO = "pago_efectivo"
    PERMATA_BANK_TRANSFER = "permata_bank_transfer"
    OPEN_BANKING_UK = "open_banking_uk"
    PAY_BRIGHT = "pay_bright"
    PAYPAL = "paypal"
    PAZE = "paze"
    PIX = "pix"
    PAY_SAFE_CARD = "pay_safe_card"
    PRZELEWY24 = "przelewy24"
    PROMPT_PAY = "prompt_pay"
    PSE = "pse"
    RED_COMPRA = "red_compra"
    RED_PAGOS = "red_pagos"
    SAMSUNG_PAY = "samsung_pay"
    SEPA = "sepa"
    SEPA_BANK_TRANSFER = "sepa_bank_transfer"
    SOFORT = "sofort"
    SWISH = "swish"
    TOUCH_N_GO = "touch_n_go"
    TRUSTLY = "trustly"
    TWINT = "twint"
    UPI_COLLECT = "upi_collect"
    UPI_INTENT = "upi_intent"
    VIPPS = "vipps"
    VIET_QR = "viet_qr"
    VENMO = "venmo"
    WALLEY = "walley"
    WE_CHAT_PAY = "we_chat_pay"
    SEVEN_ELEVEN = "seven_eleven"
    LAWSON = "lawson"
    MINI_STOP = "mini_stop"
    FAMILY_MART = "family_mart"
    SEICOMART = "seicomart"
    PAY_EASY = "pay_easy"
    LOCAL_BANK_TRANSFER = "local_bank_transfer"
    MIFINITY = "mifinity"
    OPEN_BANKING_PIS = "open_banking_pis"
    DIRECT_CARRIER_BILLING = "direct_carrier_billing"
    INSTANT_BANK_TRANSFER = "instant_bank_transfer"
    BILLIE = "billie"
    ZIP = "zip"
    REVOLUT_PAY = "revolut_pay"
    NAVER_PAY = "naver_pay"
    PAYCO = "payco"


class WebhookEventType(ApiEnum):
    PAYMENT_SUCCEEDED = "payment.succeeded"
    PAYMENT_FAILED = "payment.failed"
    PAYMENT_PROCESSING = "payment.processing"
    PAYMENT_CANCELLED = "payment.cancelled"
    REFUND_SUCCEEDED = "refund.succeeded"
    REFUND_FAILED = "refund.failed"
    DISPUTE_OPENED = "dispute.opened"
    DISPUTE_EXPIRED = "dispute.expired"
    DISPUTE_ACCEPTED = "dispute.accepted"
    DISPUTE_CANCELLED = "dispute.cancelled"
    DISPUTE_CHALLENGED = "dispute.challenged"
    DISPUTE_WON = "dispute.won"
    DISPUTE_LOST = "dispute.lost"
    SUBSCRIPTION_ACTIVE = "subscription.active"
    SUBSCRIPTION_RENEWED = "subscription.renewed"
    SUBSCRIPTION_ON_HOLD = "subscription.on_hold"
    SUBSCRIPTION_CANCELLED = "subscription.cancelled"
    SUBSCRIPTION_FAILED = "subscription.failed"
    SUBSCRIPTION_EXPIRED = "subscription.expired"
    SUBSCRIPTION_PLAN_CHANGED = "subscription.plan_changed"
    SUBSCRIPTION_UPDATED = "subscription.updated"
    LICENSE_KEY_CREATED = "license_key.created"
    PAYOUT_NOT_INITIATED = "payout.not_initiated"
    PAYOUT_ON_HOLD = "payout.on_hold"
    PAYOUT_IN_PROGRESS = "payout.in_progress"
    PAYOUT_FAILED = "payout.failed"
    PAYOUT_SUCCESS = "payout.success"
    CREDIT_ADDED = "credit.added"
    CREDIT_DEDUCTED = "credit.deducted"
    CREDIT_EXPIRED = "credit.expired"
    CREDIT_ROLLED_OVER = "credit.rolled_over"
    CREDIT_ROLLOVER_FORFEITED = "credit.rollover_forfeited"
    CREDIT_OVERAGE_CHARGED = "credit.overage_charged"
    CREDIT_MANUAL_ADJUSTMENT = "credit.manual_adjustment"
    CREDIT_BALANCE_LOW = "credit.balance_low"
