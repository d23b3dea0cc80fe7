"""
Canned Ward response bodies
"""

PICKUP_SUCCESS_BODY = (
    "<Envelope><Body><CreateResponse><CreateResult>"
    "<PickupConfirmation>ABC123</PickupConfirmation>"
    "</CreateResult></CreateResponse></Body></Envelope>"
)

PICKUP_SOAP_SUCCESS_BODY = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://www.w3.org/2003/05/soap-envelope">
  <soap:Body>
    <CreateResponse xmlns="http://tempuri.org/">
      <CreateResult>
        <PickupConfirmation>PHL0042</PickupConfirmation>
        <Message>Pickup scheduled</Message>
        <PickupTerminal>PHL</PickupTerminal>
        <WardTelephone>8005582600</WardTelephone>
        <WardEmail>phl@wardtlc.com</WardEmail>
      </CreateResult>
    </CreateResponse>
  </soap:Body>
</soap:Envelope>
"""

PICKUP_EMPTY_BODY = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://www.w3.org/2003/05/soap-envelope">
  <soap:Body>
    <CreateResponse>
      <CreateResult>
        <PickupConfirmation></PickupConfirmation>
        <Message>Invalid shipper code</Message>
      </CreateResult>
    </CreateResponse>
  </soap:Body>
</soap:Envelope>
"""

RATE_QUOTE_BODY = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://www.w3.org/2003/05/soap-envelope">
  <soap:Body>
    <CreateResponse>
      <CreateResult>
        <OriginServiceCenter>
          <ID>PHL</ID>
          <Name>Philadelphia</Name>
          <Manager>J. Smith</Manager>
          <Address>100 Terminal Rd</Address>
          <City>Philadelphia</City>
          <State>PA</State>
          <Zipcode>19153</Zipcode>
          <TransitDays>2</TransitDays>
          <Telephone>2155550100</Telephone>
          <Fax>2155550101</Fax>
        </OriginServiceCenter>
        <DestinationServiceCenter>
          <ID>CHI</ID>
          <Name>Chicago</Name>
          <City>Chicago</City>
          <State>IL</State>
          <Zipcode>60638</Zipcode>
        </DestinationServiceCenter>
        <DiscountPercentage>70.00</DiscountPercentage>
        <DiscountAmount>350.00</DiscountAmount>
        <FuelSurchargePercentage>28.5</FuelSurchargePercentage>
        <FuelSurchargeAmount>42.75</FuelSurchargeAmount>
        <NetCharge>192.75</NetCharge>
        <QuoteID>Q998877</QuoteID>
        <RateDetails>
          <RateDetail>
            <Class>70</Class>
            <Weight>500</Weight>
            <Rate>100.00</Rate>
            <Charge>500.00</Charge>
            <Accessorials>
              <Accessorial>
                <Code>LGD</Code>
                <Description>Liftgate delivery</Description>
                <Charge>75.00</Charge>
              </Accessorial>
            </Accessorials>
          </RateDetail>
          <RateDetail>
            <Class>85</Class>
            <Weight>200</Weight>
            <Rate></Rate>
            <Charge>0</Charge>
          </RateDetail>
        </RateDetails>
      </CreateResult>
    </CreateResponse>
  </soap:Body>
</soap:Envelope>
"""
