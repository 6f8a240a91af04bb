"""
Remote eTIMS OSCU endpoint paths, grouped by capability.
"""

# Authentication
GENERATE_TOKEN = "/oauth2/v1/generate"

# OSCU initialization
SELECT_INIT_OSDC_INFO = "/etims-oscu/v1/selectInitOsdcInfo"

# Basic data management
SELECT_CODE_LIST = "/etims-oscu/v1/selectCodeList"
SELECT_ITEM_CLS_LIST = "/etims-oscu/v1/selectItemClsList"
SELECT_BHF_LIST = "/etims-oscu/v1/selectBhfList"
SELECT_NOTICE_LIST = "/etims-oscu/v1/selectNoticeList"
SELECT_TAXPAYER_INFO = "/etims-oscu/v1/selectTaxpayerInfo"
SELECT_CUSTOMER_LIST = "/etims-oscu/v1/selectCustomerList"

# Item management
SAVE_ITEM = "/etims-oscu/v1/saveItem"

# Sales management
SEND_SALES_TRNS = "/etims-oscu/v1/sendSalesTrns"
SELECT_SALES_TRNS = "/etims-oscu/v1/selectSalesTrns"

# Stock management
SELECT_MOVE_LIST = "/etims-oscu/v1/selectMoveList"
SAVE_STOCK_MASTER = "/etims-oscu/v1/saveStockMaster"

# Purchase management
SELECT_PURCHASE_TRNS = "/etims-oscu/v1/selectPurchaseTrns"

# Imports item management
SELECT_IMPORT_ITEM_LIST = "/etims-oscu/v1/selectImportItemList"
